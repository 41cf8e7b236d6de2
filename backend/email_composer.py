"""
Quote email composer.

Builds the subject/body of the outbound quote email from a QuoteResult, plus
the two artifacts handed to the mail client: a mailto: link and an .eml file.
"""

from typing import Optional
from urllib.parse import quote, urlencode

from .config import settings
from .formatting import money0, money2, multiple, nights, pct
from .schemas import ContactInfo, EmailDraft, PricingConstants, QuoteInput, QuoteResult

CRLF = "\r\n"
# characters encodeURIComponent leaves alone, beyond alphanumerics and -_.
_URI_COMPONENT_SAFE = "!~*'()"


def _price_list(pricing: PricingConstants) -> str:
    return (
        f"Furniture {money0(pricing.furniture_price)}/room · "
        f"Tub {money0(pricing.tub_price)}/tub · "
        f"Bundle {money0(pricing.bundle_price)}/room · "
        f"Deposit {pricing.deposit_pct:g}%"
    )


def compose_subject(result: QuoteResult, contact: ContactInfo) -> str:
    return f"Quote — {result.service_label} — {result.scope_text} — {contact.company}"


def compose_email(
    result: QuoteResult,
    contact: ContactInfo,
    pricing: PricingConstants,
    quote_input: QuoteInput,
) -> EmailDraft:
    """
    Render the quote email.

    Only the payback block is conditional; it appears when the result carries
    payback_nights. The assumptions block and the ADR echo come from
    quote_input, the same input the result was computed from.
    """
    deposit_pct = f"{pricing.deposit_pct:g}"

    lines = [
        f"Hi {contact.name},",
        "",
        f"Here's your quote for {contact.company}:",
        "",
        f"Service: {result.service_label}",
        f"Scope: {result.scope_text}",
        f"Unit Price: {money0(result.unit_price)} {result.unit_label}",
        f"Service Total: {money0(result.quote_total)}",
        f"Deposit ({deposit_pct}%): {money2(result.deposit)}",
        f"Final on completion: {money2(result.remainder)}",
        "",
        "ROI vs Replacement:",
        f"• Replacement Baseline: {money0(result.replacement_baseline)}",
        f"• Savings: {money0(result.savings)} ({pct(result.savings_pct)})",
        f"• ROI Multiple: {multiple(result.roi_multiple)} (Savings / Your Spend)",
    ]

    if result.payback_nights is not None:
        lines += [
            "",
            "Payback (optional):",
            f"• Nights to pay back per unit at ADR {money2(quote_input.average_daily_rate)}: "
            f"{nights(result.payback_nights)} night(s)",
        ]

    lines += [
        "",
        "Assumptions:",
        f"• Casegoods replacement baseline: {money0(quote_input.casegoods_replacement_per_room)} per room",
        f"• Tub replacement baseline: {money0(quote_input.tub_replacement_per_tub)} per tub",
        f"• Pricing: {_price_list(pricing)}",
        "",
        "Notes:",
        "• In-room service, minimal downtime, no freight/haul-away.",
        "• Quote valid 30 days. Taxes, parking, and unusual conditions not included.",
        "",
        "Thanks,",
        settings.COMPANY_NAME,
    ]

    return EmailDraft(subject=compose_subject(result, contact), body="\n".join(lines))


def build_mailto(to: str, subject: str, body: str, cc: Optional[str] = None) -> str:
    """mailto: link with the recipient percent-encoded and form-encoded params."""
    params = [("subject", subject), ("body", body)]
    if cc:
        params.append(("cc", cc))
    return f"mailto:{quote(to, safe=_URI_COMPONENT_SAFE)}?{urlencode(params)}"


def build_eml(to: str, subject: str, body: str, cc: Optional[str] = None) -> str:
    """
    Serialize a plain-text RFC 822 message.

    Headers and the separating blank line end in CRLF, and every line
    terminator in the body is normalized to CRLF.
    """
    headers = [
        f"To: {to}",
        f"Cc: {cc}" if cc else None,
        f"Subject: {subject}",
        "MIME-Version: 1.0",
        "Content-Type: text/plain; charset=utf-8",
        "Content-Transfer-Encoding: 8bit",
    ]
    head = CRLF.join(h for h in headers if h)
    normalized = body.replace("\r\n", "\n").replace("\r", "\n").replace("\n", CRLF)
    return head + CRLF + CRLF + normalized
