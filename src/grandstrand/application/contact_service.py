"""Contact add, delete, lookup and update, plus E.164 phone display."""

from collections.abc import Callable

from grandstrand.application.ports import RecordRepository
from grandstrand.application.record_service import RecordService
from grandstrand.domain import Contact, InvalidOperation

DEFAULT_PHONE_REGION = "US"

# (national_number, region) -> E.164 string, or None if not valid for the region
PhoneFormatter = Callable[[str, str], str | None]


class ContactService(RecordService[Contact]):
    """Address book keyed by contact id. Phone numbers are ten-digit national numbers."""

    kind = "Contact"
    record_type = Contact

    def __init__(
        self,
        repository: RecordRepository[Contact],
        *,
        format_phone: PhoneFormatter | None = None,
        phone_region: str = DEFAULT_PHONE_REGION,
    ) -> None:
        super().__init__(repository)
        self._format_phone = format_phone
        self._phone_region = phone_region

    def add_contact(self, contact: Contact) -> None:
        """Store a new contact. Raises InvalidOperation on None or duplicate id."""
        self._add(contact)

    def delete_contact(self, contact_id: str) -> bool:
        """Remove a contact. Returns True if removed, False if not found."""
        return self._delete(contact_id)

    def get_contact(self, contact_id: str) -> Contact | None:
        """Return a contact by id, or None if not found."""
        return self._get(contact_id)

    def list_contacts(self) -> list[Contact]:
        return self._list()

    def update_first_name(self, contact_id: str, first_name: str) -> None:
        self._update(contact_id, "first_name", first_name)

    def update_last_name(self, contact_id: str, last_name: str) -> None:
        self._update(contact_id, "last_name", last_name)

    def update_phone_number(self, contact_id: str, phone_number: str) -> None:
        self._update(contact_id, "phone_number", phone_number)

    def update_address(self, contact_id: str, address: str) -> None:
        self._update(contact_id, "address", address)

    def international_phone_number(
        self, contact_id: str, region: str | None = None
    ) -> str | None:
        """Return the contact's number in E.164 form, or None if not valid for the region.

        Raises RecordNotFound if the contact is not stored, and InvalidOperation
        if the service was built without a phone formatter.
        """
        if self._format_phone is None:
            raise InvalidOperation("No phone formatter configured.")
        with self._lock:
            phone_number = self._require(contact_id).phone_number
        return self._format_phone(phone_number, region or self._phone_region)
