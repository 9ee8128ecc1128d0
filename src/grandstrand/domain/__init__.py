"""Domain layer: entities, validators and errors. No dependencies on outer layers."""

from grandstrand.domain.entities import Appointment, Contact, Task
from grandstrand.domain.exceptions import (
    DuplicateRecord,
    InvalidOperation,
    RecordError,
    RecordNotFound,
    ValidationError,
)

__all__ = [
    "Appointment",
    "Contact",
    "DuplicateRecord",
    "InvalidOperation",
    "RecordError",
    "RecordNotFound",
    "Task",
    "ValidationError",
]
