"""Appointment add, delete, lookup and update."""

from datetime import datetime

from grandstrand.application.record_service import RecordService
from grandstrand.domain import Appointment


class AppointmentService(RecordService[Appointment]):
    kind = "Appointment"
    record_type = Appointment

    def add_appointment(self, appointment: Appointment) -> None:
        """Store a new appointment. Raises InvalidOperation on None or duplicate id."""
        self._add(appointment)

    def delete_appointment(self, appointment_id: str) -> bool:
        """Remove an appointment. Returns False if it was not stored."""
        return self._delete(appointment_id)

    def get_appointment(self, appointment_id: str) -> Appointment | None:
        return self._get(appointment_id)

    def list_appointments(self) -> list[Appointment]:
        return self._list()

    def update_date(self, appointment_id: str, date: datetime) -> None:
        self._update(appointment_id, "date", date)

    def update_description(self, appointment_id: str, description: str) -> None:
        self._update(appointment_id, "description", description)
