"""Numeric formatting helpers for result models.

Engine functions work with floats internally. Values are rendered as
fixed-decimal strings only when a result is exported through ``to_dict()``.
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal

NOT_APPLICABLE = "N/A"

# Wide enough for any finite float
_CONTEXT = Context(prec=400)


def _quantize(value: float, places: int) -> Decimal:
    if value == 0:
        value = 0.0  # drop the sign of -0.0
    quantum = Decimal(1).scaleb(-places)
    return Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_CONTEXT)


def round_half_away(value: float, places: int = 2) -> float:
    """Round to a fixed number of decimals, ties away from zero.

    The exact binary value of the float is rounded, so 1.005 (stored as
    1.00499999...) rounds down while 0.125 rounds up to 0.13.

    Example:
        >>> round_half_away(0.125)
        0.13
        >>> round_half_away(-2.5, 0)
        -3.0
    """
    if not math.isfinite(value):
        return value
    return float(_quantize(value, places))


def format_amount(value: float, places: int = 2) -> str:
    """Format a number as a fixed-decimal string.

    Non-finite values are rendered as "Infinity", "-Infinity" or "NaN".

    Example:
        >>> format_amount(80000)
        '80000.00'
        >>> format_amount(-10000)
        '-10000.00'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return str(_quantize(value, places))


def format_optional_amount(value: float | None, places: int = 2) -> str:
    """Format a number, rendering None as the "N/A" sentinel."""
    if value is None:
        return NOT_APPLICABLE
    return format_amount(value, places)


def format_number(value: float) -> str:
    """Render a number the shortest way that round-trips.

    Whole numbers drop the fractional part; other values keep every
    significant digit.

    Example:
        >>> format_number(95.0)
        '95'
        >>> format_number(12.5)
        '12.5'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_percent(fraction: float) -> str:
    """Format a fraction as a percentage label (0.95 -> "95%")."""
    return f"{format_number(fraction * 100)}%"


def format_horizon(days: int) -> str:
    """Format a time horizon label (1 -> "1 day(s)")."""
    return f"{format_number(days)} day(s)"
