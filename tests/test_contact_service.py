"""Unit tests for ContactService. In-memory repo; phone formatting via phonenumbers."""

import pytest

from grandstrand.application import ContactService
from grandstrand.domain import (
    Contact,
    DuplicateRecord,
    InvalidOperation,
    RecordNotFound,
    ValidationError,
)
from grandstrand.infrastructure import InMemoryRecordRepository, to_e164


def _service(**kwargs) -> ContactService:
    return ContactService(repository=InMemoryRecordRepository(), **kwargs)


def _contact(contact_id: str = "C1") -> Contact:
    return Contact(contact_id, "Ada", "Lovelace", "2025551234", "12 St James's Square")


def test_add_then_get_round_trips_fields() -> None:
    service = _service()
    service.add_contact(_contact())

    found = service.get_contact("C1")
    assert found is not None
    assert found.as_dict() == {
        "id": "C1",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "phone_number": "2025551234",
        "address": "12 St James's Square",
    }


def test_add_none_and_duplicate_rejected() -> None:
    service = _service()
    with pytest.raises(InvalidOperation):
        service.add_contact(None)

    service.add_contact(_contact())
    with pytest.raises(DuplicateRecord):
        service.add_contact(_contact())
    assert len(service.list_contacts()) == 1


def test_delete_returns_bool() -> None:
    service = _service()
    service.add_contact(_contact())
    assert service.delete_contact("nope") is False
    assert service.delete_contact("C1") is True
    assert service.get_contact("C1") is None


def test_updates_apply_in_place() -> None:
    service = _service()
    contact = _contact()
    service.add_contact(contact)

    service.update_first_name("C1", "Grace")
    service.update_last_name("C1", "Hopper")
    service.update_phone_number("C1", "3125550000")
    service.update_address("C1", "Arlington")

    assert contact.first_name == "Grace"
    assert service.get_contact("C1").last_name == "Hopper"
    assert service.get_contact("C1").phone_number == "3125550000"
    assert service.get_contact("C1").address == "Arlington"


@pytest.mark.parametrize(
    "update",
    [
        "update_first_name",
        "update_last_name",
        "update_phone_number",
        "update_address",
    ],
)
def test_update_unknown_contact_rejected(update) -> None:
    service = _service()
    with pytest.raises(RecordNotFound):
        getattr(service, update)("missing", "x")
    with pytest.raises(InvalidOperation):
        getattr(service, update)(None, "x")
    assert len(service) == 0


def test_invalid_phone_update_leaves_contact_unchanged() -> None:
    service = _service()
    service.add_contact(_contact())
    for bad in ("123456789", "12345678901", "12345abcde", None):
        with pytest.raises(ValidationError):
            service.update_phone_number("C1", bad)
    assert service.get_contact("C1").phone_number == "2025551234"


def test_international_phone_number_uses_default_region() -> None:
    service = _service(format_phone=to_e164)
    service.add_contact(_contact())
    assert service.international_phone_number("C1") == "+12025551234"


def test_international_phone_number_invalid_for_region_returns_none() -> None:
    service = _service(format_phone=to_e164, phone_region="US")
    service.add_contact(Contact("C2", "A", "B", "0000000000", "x"))
    assert service.international_phone_number("C2") is None


def test_international_phone_number_unknown_contact() -> None:
    service = _service(format_phone=to_e164)
    with pytest.raises(RecordNotFound):
        service.international_phone_number("missing")


def test_international_phone_number_without_formatter() -> None:
    service = _service()
    service.add_contact(_contact())
    with pytest.raises(InvalidOperation):
        service.international_phone_number("C1")


def test_custom_formatter_receives_region() -> None:
    calls = []

    def fmt(number: str, region: str):
        calls.append((number, region))
        return "formatted"

    service = _service(format_phone=fmt, phone_region="CA")
    service.add_contact(_contact())
    assert service.international_phone_number("C1") == "formatted"
    assert service.international_phone_number("C1", region="GB") == "formatted"
    assert calls == [("2025551234", "CA"), ("2025551234", "GB")]
