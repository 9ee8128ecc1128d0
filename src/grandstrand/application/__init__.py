"""Application layer: record services and ports. Depends only on domain."""

from grandstrand.application.appointment_service import AppointmentService
from grandstrand.application.contact_service import ContactService
from grandstrand.application.ports import RecordRepository
from grandstrand.application.record_service import RecordService
from grandstrand.application.task_service import TaskService

__all__ = [
    "AppointmentService",
    "ContactService",
    "RecordRepository",
    "RecordService",
    "TaskService",
]
