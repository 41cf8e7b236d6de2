"""
Display formatting. Values are rounded here and nowhere upstream.

Ties round half away from zero on the exact binary value, the way browser
toFixed() and currency formatting do, so 0.25 nights shows as 0.3.
"""

from decimal import ROUND_HALF_UP, Decimal


def _round(value, places: int) -> Decimal:
    return Decimal(float(value)).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def money0(amount) -> str:
    """Format a number as $X,XXX"""
    return f"${_round(amount, 0):,.0f}"


def money2(amount) -> str:
    """Format a number as $X,XXX.XX"""
    return f"${_round(amount, 2):,.2f}"


def pct(ratio: float) -> str:
    """0.979 -> '97.9%'"""
    return f"{_round(ratio * 100, 1)}%"


def multiple(ratio: float) -> str:
    """47.0 -> '47.00x'"""
    return f"{_round(ratio, 2)}x"


def nights(value: float) -> str:
    return str(_round(value, 1))
