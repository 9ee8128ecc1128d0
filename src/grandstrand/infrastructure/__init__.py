"""Infrastructure layer: concrete implementations of application ports."""

from grandstrand.infrastructure.logging_config import configure_logging
from grandstrand.infrastructure.memory_repository import InMemoryRecordRepository
from grandstrand.infrastructure.phone import to_e164
from grandstrand.infrastructure.services import RecordServices, create_services
from grandstrand.infrastructure.settings import Settings, load_settings

__all__ = [
    "InMemoryRecordRepository",
    "RecordServices",
    "Settings",
    "configure_logging",
    "create_services",
    "load_settings",
    "to_e164",
]
