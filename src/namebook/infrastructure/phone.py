"""WhatsApp deep links for stored phone numbers."""

from urllib.parse import quote

import phonenumbers

WHATSAPP_BASE_URL = "https://wa.me/"


def international_digits(phone: str, default_region: str | None = None) -> str:
    """Return the number as international digits (no "+"), for wa.me.

    Use default_region when stored numbers are national (e.g. "0551234567"
    with default_region "SA" gives "966551234567"). Without a region, or if
    the number cannot be parsed, the stored digits are returned unchanged.
    Validity is not checked.
    """
    phone = (phone or "").strip()
    if not phone or not default_region:
        return phone
    try:
        parsed = phonenumbers.parse(phone, default_region.upper())
    except phonenumbers.NumberParseException:
        return phone
    e164 = phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
    return e164.lstrip("+") or phone


def whatsapp_link(
    phone: str, default_region: str | None = None, text: str | None = None
) -> str:
    """Build https://wa.me/<digits>, optionally with a prefilled message."""
    url = WHATSAPP_BASE_URL + international_digits(phone, default_region)
    if text:
        url += "?text=" + quote(text)
    return url
