"""
Input normalization and contact-form checks.

Everything here is total: numeric coercions never fail (unparseable input
becomes 0 before clamping) and the contact check returns the first failing
rule instead of raising.
"""

import math
import re
from typing import NamedTuple, Optional

DEFAULT_MAX = 999999
ADR_MAX = 9999

FREE_EMAIL_DOMAINS = frozenset({
    "gmail.com", "yahoo.com", "hotmail.com", "outlook.com", "aol.com",
    "icloud.com", "me.com", "msn.com", "live.com", "proton.me",
    "protonmail.com", "yandex.com", "gmx.com", "zoho.com", "mail.com",
})

_EMAIL_RE = re.compile(r"^([A-Z0-9._%+-]+)@([A-Z0-9.-]+\.[A-Z]{2,})$", re.IGNORECASE | re.ASCII)
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_LEADING_DECIMAL_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_PHONE_RE = re.compile(r"^(\d{3})(\d{3})(\d{4})$")


class ContactIssue(NamedTuple):
    """First failing contact-form rule: message to show, field to focus."""
    message: str
    field: str


def _parse_int(value) -> int:
    """Leading-integer parse: '12abc' -> 12, 'abc' -> 0, 12.9 -> 12."""
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    m = _LEADING_INT_RE.match(str(value or ""))
    return int(m.group(1)) if m else 0


def _parse_decimal(value) -> float:
    if isinstance(value, (int, float)):
        return 0.0 if math.isnan(value) else float(value)
    m = _LEADING_DECIMAL_RE.match(str(value))
    return float(m.group(1)) if m else 0.0


def clamp_int(value, minimum: int = 0, maximum: int = DEFAULT_MAX) -> int:
    """Parse an integer form value and clamp it to [minimum, maximum]."""
    return max(minimum, min(maximum, _parse_int(value)))


def parse_adr(value) -> Optional[float]:
    """
    Parse the average-daily-rate field.

    Empty input stays unset (None) rather than 0: an unset ADR means no
    payback figure at all, while 0 means the payback guard kicks in.
    """
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return max(0.0, min(float(ADR_MAX), _parse_decimal(value)))


def format_phone(value: str) -> str:
    """Render 10-digit input as (AAA) BBB-CCCC; anything else is returned as typed."""
    cleaned = re.sub(r"\D", "", value)
    match = _PHONE_RE.match(cleaned)
    if match:
        return f"({match.group(1)}) {match.group(2)}-{match.group(3)}"
    return value


def phone_digits(value: str) -> str:
    return re.sub(r"\D", "", value)


def is_business_email(email: str) -> bool:
    m = _EMAIL_RE.match(email.strip())
    if not m:
        return False
    return m.group(2).lower() not in FREE_EMAIL_DOMAINS


# Evaluated in order; only the first failure is ever reported.
CONTACT_RULES = [
    (lambda c: bool(c.name.strip()), "Name is required", "name"),
    (lambda c: bool(c.email.strip()), "Business email is required", "email"),
    (lambda c: is_business_email(c.email),
     "Please enter a business email (no free email domains)", "email"),
    (lambda c: bool(c.phone.strip()), "Phone is required", "phone"),
    (lambda c: bool(c.company.strip()), "Company is required", "company"),
]


def validate_contact(contact) -> Optional[ContactIssue]:
    """
    Run the contact-form rules against anything with name/email/phone/company
    attributes. Returns None when every rule passes.
    """
    for check, message, field in CONTACT_RULES:
        if not check(contact):
            return ContactIssue(message, field)
    return None
