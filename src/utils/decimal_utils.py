"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")
NAN = Decimal("NaN")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a form, a store payload or a caller.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_amount(raw) -> Decimal:
    """Parse a form value into a Decimal.

    Unparsable values become NaN and propagate through later arithmetic.

    Args:
        raw: String (or number) entered by the user.

    Returns:
        Decimal: Parsed amount, or NaN when the value is not numeric.
    """
    if isinstance(raw, Decimal):
        return raw
    if raw is None or isinstance(raw, bool):
        return NAN
    text = str(raw).strip()
    if not text:
        return NAN
    try:
        value = Decimal(text)
    except InvalidOperation:
        return NAN
    return NAN if value.is_nan() else value


def round_money(value: Decimal) -> Decimal:
    """Round a monetary value to cents, half away from zero.

    Args:
        value: Amount to round.

    Returns:
        Decimal: Rounded amount (NaN and infinities are returned unchanged).
    """
    if not value.is_finite():
        return value
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


__all__ = ["CENT", "NAN", "coerce_decimal", "parse_amount", "round_money"]
