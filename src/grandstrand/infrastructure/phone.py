"""E.164 display form for the ten-digit national numbers contacts store."""

import phonenumbers


def to_e164(national_number: str, region: str) -> str | None:
    """Return national_number as E.164 for region, or None if it is not a valid number there.

    The region supplies the country code: "2025551234" with "US" gives
    "+12025551234". An unknown region code yields None.
    """
    try:
        parsed = phonenumbers.parse(national_number, region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number_for_region(parsed, region):
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
