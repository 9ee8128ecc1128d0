"""Wiring: build each record service over its own in-memory repository."""

from dataclasses import dataclass

from grandstrand.application import AppointmentService, ContactService, TaskService
from grandstrand.infrastructure.memory_repository import InMemoryRecordRepository
from grandstrand.infrastructure.phone import to_e164
from grandstrand.infrastructure.settings import Settings, load_settings


@dataclass(frozen=True)
class RecordServices:
    appointments: AppointmentService
    contacts: ContactService
    tasks: TaskService


def create_services(settings: Settings | None = None) -> RecordServices:
    """Return fresh services. No repository is shared between them."""
    settings = settings or load_settings()
    return RecordServices(
        appointments=AppointmentService(InMemoryRecordRepository()),
        contacts=ContactService(
            InMemoryRecordRepository(),
            format_phone=to_e164,
            phone_region=settings.phone_region,
        ),
        tasks=TaskService(InMemoryRecordRepository()),
    )
