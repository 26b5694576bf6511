"""Phone number formatting for contacts the relay sends to Odoo."""

import phonenumbers


def phone_for_backend(raw: str, default_region: str | None = None) -> str:
    """Return the number in E.164 when it is valid, otherwise as typed (trimmed).

    default_region resolves numbers typed without a leading + (e.g.
    "202 555 1234" with "US"). Odoo accepts free-text phones, so a number
    that does not parse is kept rather than rejected.
    """
    typed = (raw or "").strip()
    if not typed:
        return typed
    try:
        parsed = phonenumbers.parse(typed, default_region)
    except phonenumbers.NumberParseException:
        return typed
    if not phonenumbers.is_valid_number(parsed):
        return typed
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
