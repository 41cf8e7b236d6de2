"""
Quote Engine.

Turns a QuoteInput into a QuoteResult: service total, replacement baseline,
savings, ROI, deposit split and optional payback.
Pure math. No rounding happens here; values are rounded only when a
document or response formats them.
"""

from .schemas import DEFAULT_PRICING, PricingConstants, QuoteInput, QuoteResult, ServiceType

# service -> (display label, unit label)
SERVICE_LABELS = {
    ServiceType.FURNITURE: ("Furniture (Casegoods) Only", "/room"),
    ServiceType.TUBS: ("Tubs Only", "/tub"),
    ServiceType.BUNDLE: ("Bundle: Furniture + Tub", "/room (both)"),
}


def unit_price_for(service: ServiceType, pricing: PricingConstants = DEFAULT_PRICING) -> float:
    if service == ServiceType.FURNITURE:
        return pricing.furniture_price
    if service == ServiceType.TUBS:
        return pricing.tub_price
    return pricing.bundle_price


def _quantity_and_baseline(quote_input: QuoteInput) -> tuple:
    """Returns (quantity, per-unit replacement cost, scope text)."""
    if quote_input.service == ServiceType.FURNITURE:
        rooms = quote_input.room_count
        return rooms, quote_input.casegoods_replacement_per_room, f"{rooms} room(s)"

    if quote_input.service == ServiceType.TUBS:
        tubs = quote_input.tub_count
        return tubs, quote_input.tub_replacement_per_tub, f"{tubs} tub(s)"

    rooms = quote_input.room_count
    both = quote_input.casegoods_replacement_per_room + quote_input.tub_replacement_per_tub
    return rooms, both, f"{rooms} room(s) (both)"


def compute_quote(quote_input: QuoteInput, pricing: PricingConstants = DEFAULT_PRICING) -> QuoteResult:
    """
    Compute every derived figure for a quote.

    Total for every valid input: both ratios fall back to 0 when their
    denominator is 0, and payback stays None unless an ADR above 0 is set.
    """
    service = quote_input.service
    service_label, unit_label = SERVICE_LABELS[service]
    unit_price = float(unit_price_for(service, pricing))

    quantity, per_unit_replacement, scope = _quantity_and_baseline(quote_input)

    quote_total = float(quantity * unit_price)
    baseline = float(quantity * per_unit_replacement)

    savings = max(baseline - quote_total, 0.0)
    savings_pct = savings / baseline if baseline > 0 else 0.0
    roi = savings / quote_total if quote_total > 0 else 0.0

    # Split from the unrounded total; remainder is derived, never rounded on its own
    deposit = quote_total * pricing.deposit_pct / 100
    remainder = quote_total - deposit

    payback = None
    adr = quote_input.average_daily_rate
    if adr is not None and adr > 0:
        payback = unit_price / adr

    return QuoteResult(
        service=service,
        quantity=quantity,
        unit_price=unit_price,
        unit_label=unit_label,
        service_label=service_label,
        scope_text=scope,
        quote_total=quote_total,
        replacement_baseline=baseline,
        savings=savings,
        savings_pct=savings_pct,
        roi_multiple=roi,
        deposit=deposit,
        remainder=remainder,
        payback_nights=payback,
    )
