# app/utils/decimal_utils.py
from decimal import Decimal, InvalidOperation, ROUND_DOWN, ROUND_HALF_UP

TWOPLACES = Decimal("0.01")
ZERO = Decimal("0")


def _parse_finite(value) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not parsed.is_finite():
        return None
    return parsed


def coerce_decimal(value) -> Decimal:
    """Lenient money parsing: anything that is not a finite number is zero."""
    parsed = _parse_finite(value)
    return ZERO if parsed is None else parsed


def coerce_int(value) -> int:
    """Lenient quantity parsing: non-numeric is zero, fractions truncate."""
    parsed = _parse_finite(value)
    if parsed is None:
        return 0
    return int(parsed.to_integral_value(rounding=ROUND_DOWN))


def round_money(value) -> Decimal:
    """Two-place, half-up rounding for amounts returned to clients."""
    return coerce_decimal(value).quantize(TWOPLACES, rounding=ROUND_HALF_UP)
