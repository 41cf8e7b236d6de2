"""
Pre-filled calendar booking link.

The booking form asks for the service and room count as custom answers
(a1/a2/a3). The phone goes out under several parameter names since the form
has accepted different ones over time; digits-only everywhere except
phone_formatted.
"""

from urllib.parse import urlencode

from .config import settings
from .schemas import ContactInfo, QuoteInput, QuoteResult, ServiceType
from .validation import phone_digits


def build_booking_url(contact: ContactInfo, quote_input: QuoteInput, result: QuoteResult) -> str:
    digits = phone_digits(contact.phone)
    count = quote_input.tub_count if quote_input.service == ServiceType.TUBS else quote_input.room_count
    params = [
        ("name", contact.name),
        ("email", contact.email),
        ("a1", result.service_label),
        ("a2", str(count)),
        ("a3", digits),
        ("phone", digits),
        ("phone_number", digits),
        ("answer_1", digits),
        ("phone_formatted", contact.phone),
    ]
    return f"{settings.BOOK_LINK}?{urlencode(params)}"
