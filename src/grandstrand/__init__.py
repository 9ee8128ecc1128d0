"""
Grandstrand records: clean-architecture layout.

- domain: entities (Appointment, Contact, Task) and errors. No outer dependencies.
- application: record services (AppointmentService, ContactService, TaskService), ports.
- infrastructure: adapters (InMemoryRecordRepository, phone formatting, settings).
"""

from grandstrand.application import (
    AppointmentService,
    ContactService,
    RecordRepository,
    TaskService,
)
from grandstrand.domain import (
    Appointment,
    Contact,
    DuplicateRecord,
    InvalidOperation,
    RecordError,
    RecordNotFound,
    Task,
    ValidationError,
)
from grandstrand.infrastructure import (
    InMemoryRecordRepository,
    RecordServices,
    Settings,
    configure_logging,
    create_services,
    load_settings,
)

__all__ = [
    "Appointment",
    "AppointmentService",
    "Contact",
    "ContactService",
    "DuplicateRecord",
    "InMemoryRecordRepository",
    "InvalidOperation",
    "RecordError",
    "RecordNotFound",
    "RecordRepository",
    "RecordServices",
    "Settings",
    "Task",
    "TaskService",
    "ValidationError",
    "configure_logging",
    "create_services",
    "load_settings",
]
