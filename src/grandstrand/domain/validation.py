"""Field validators shared by the entities. Each returns the value or raises ValidationError."""

import re
from datetime import datetime, timezone

from grandstrand.domain.exceptions import ValidationError

_DIGITS = re.compile(r"[0-9]+")


def current_time(reference: datetime) -> datetime:
    """Return "now" comparable with reference (aware UTC or naive local)."""
    if reference.tzinfo is not None:
        return datetime.now(timezone.utc)
    return datetime.now()


def bounded_text(
    label: str, field: str, value: object, max_length: int, *, min_length: int = 0
) -> str:
    if value is None:
        raise ValidationError(field, f"{label} cannot be null.")
    if not isinstance(value, str):
        raise ValidationError(field, f"{label} must be a string.")
    if len(value) > max_length:
        raise ValidationError(
            field, f"{label} cannot be more than {max_length} characters."
        )
    if len(value) < min_length:
        raise ValidationError(
            field, f"{label} must be at least {min_length} characters."
        )
    return value


def exact_digits(label: str, field: str, value: object, length: int) -> str:
    if value is None:
        raise ValidationError(field, f"{label} cannot be null.")
    # str.isdigit() accepts non-ASCII digits, so match explicitly.
    if (
        not isinstance(value, str)
        or len(value) != length
        or not _DIGITS.fullmatch(value)
    ):
        raise ValidationError(field, f"{label} must be exactly {length} digits.")
    return value


def future_datetime(label: str, field: str, value: object) -> datetime:
    if value is None:
        raise ValidationError(field, f"{label} cannot be null.")
    if not isinstance(value, datetime):
        raise ValidationError(field, f"{label} must be a datetime.")
    if value <= current_time(value):
        raise ValidationError(field, f"{label} cannot be in the past.")
    return value
