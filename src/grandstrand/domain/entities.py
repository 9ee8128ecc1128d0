"""Domain entities: Appointment, Contact, and Task.

Every field is validated before anything is stored, so a failed constructor
never leaves a partly initialised record behind. The id is write-once;
other fields stay mutable through their validating setters.
"""

from datetime import datetime

from grandstrand.domain.exceptions import ValidationError
from grandstrand.domain.validation import bounded_text, exact_digits, future_datetime

APPOINTMENT_ID_MAX_LENGTH = 10
APPOINTMENT_DESCRIPTION_MAX_LENGTH = 50

CONTACT_ID_MAX_LENGTH = 10
CONTACT_FIRST_NAME_MAX_LENGTH = 10
CONTACT_LAST_NAME_MAX_LENGTH = 10
CONTACT_PHONE_NUMBER_LENGTH = 10
CONTACT_ADDRESS_MAX_LENGTH = 30

TASK_ID_MAX_LENGTH = 10
TASK_NAME_MAX_LENGTH = 20
TASK_DESCRIPTION_MAX_LENGTH = 50


def _immutable_id(label: str) -> ValidationError:
    return ValidationError("id", f"{label} cannot be changed after initialization.")


class Appointment:
    """A scheduled appointment. The date must lie in the future when set."""

    def __init__(self, id: str, date: datetime, description: str) -> None:
        id = bounded_text(
            "Appointment ID", "id", id, APPOINTMENT_ID_MAX_LENGTH, min_length=1
        )
        date = future_datetime("Appointment date", "date", date)
        description = self._check_description(description)
        self._id = id
        self._date = date
        self._description = description

    @staticmethod
    def _check_description(value: object) -> str:
        return bounded_text(
            "Appointment description",
            "description",
            value,
            APPOINTMENT_DESCRIPTION_MAX_LENGTH,
        )

    @property
    def id(self) -> str:
        return self._id

    @id.setter
    def id(self, value: str) -> None:
        raise _immutable_id("Appointment ID")

    @property
    def date(self) -> datetime:
        return self._date

    @date.setter
    def date(self, value: datetime) -> None:
        self._date = future_datetime("Appointment date", "date", value)

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._description = self._check_description(value)

    def as_dict(self) -> dict:
        return {"id": self._id, "date": self._date, "description": self._description}

    def __repr__(self) -> str:
        return (
            f"Appointment(id={self._id!r}, date={self._date!r}, "
            f"description={self._description!r})"
        )


class Contact:
    """
    A person in the address book.
    The phone number is stored as exactly ten digits with no formatting.
    """

    def __init__(
        self,
        id: str,
        first_name: str,
        last_name: str,
        phone_number: str,
        address: str,
    ) -> None:
        id = bounded_text("Contact ID", "id", id, CONTACT_ID_MAX_LENGTH, min_length=1)
        first_name = self._check_first_name(first_name)
        last_name = self._check_last_name(last_name)
        phone_number = self._check_phone_number(phone_number)
        address = self._check_address(address)
        self._id = id
        self._first_name = first_name
        self._last_name = last_name
        self._phone_number = phone_number
        self._address = address

    @staticmethod
    def _check_first_name(value: object) -> str:
        return bounded_text(
            "First name", "first_name", value, CONTACT_FIRST_NAME_MAX_LENGTH
        )

    @staticmethod
    def _check_last_name(value: object) -> str:
        return bounded_text("Last name", "last_name", value, CONTACT_LAST_NAME_MAX_LENGTH)

    @staticmethod
    def _check_phone_number(value: object) -> str:
        return exact_digits(
            "Phone number", "phone_number", value, CONTACT_PHONE_NUMBER_LENGTH
        )

    @staticmethod
    def _check_address(value: object) -> str:
        return bounded_text("Address", "address", value, CONTACT_ADDRESS_MAX_LENGTH)

    @property
    def id(self) -> str:
        return self._id

    @id.setter
    def id(self, value: str) -> None:
        raise _immutable_id("Contact ID")

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        self._first_name = self._check_first_name(value)

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str) -> None:
        self._last_name = self._check_last_name(value)

    @property
    def phone_number(self) -> str:
        return self._phone_number

    @phone_number.setter
    def phone_number(self, value: str) -> None:
        self._phone_number = self._check_phone_number(value)

    @property
    def address(self) -> str:
        return self._address

    @address.setter
    def address(self, value: str) -> None:
        self._address = self._check_address(value)

    def as_dict(self) -> dict:
        return {
            "id": self._id,
            "first_name": self._first_name,
            "last_name": self._last_name,
            "phone_number": self._phone_number,
            "address": self._address,
        }

    def __repr__(self) -> str:
        return (
            f"Contact(id={self._id!r}, first_name={self._first_name!r}, "
            f"last_name={self._last_name!r}, phone_number={self._phone_number!r}, "
            f"address={self._address!r})"
        )


class Task:
    """A named task with a short description."""

    def __init__(self, id: str, name: str, description: str) -> None:
        id = bounded_text("Task ID", "id", id, TASK_ID_MAX_LENGTH)
        name = self._check_name(name)
        description = self._check_description(description)
        self._id = id
        self._name = name
        self._description = description

    @staticmethod
    def _check_name(value: object) -> str:
        return bounded_text("Task name", "name", value, TASK_NAME_MAX_LENGTH)

    @staticmethod
    def _check_description(value: object) -> str:
        return bounded_text(
            "Task description", "description", value, TASK_DESCRIPTION_MAX_LENGTH
        )

    @property
    def id(self) -> str:
        return self._id

    @id.setter
    def id(self, value: str) -> None:
        raise _immutable_id("Task ID")

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = self._check_name(value)

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._description = self._check_description(value)

    def as_dict(self) -> dict:
        return {"id": self._id, "name": self._name, "description": self._description}

    def __repr__(self) -> str:
        return (
            f"Task(id={self._id!r}, name={self._name!r}, "
            f"description={self._description!r})"
        )
