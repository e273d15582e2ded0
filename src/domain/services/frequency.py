"""Recurring amount normalization to a monthly cadence."""

from decimal import Decimal

from src.domain.constants import MONTHLY_CONVERSION
from src.domain.models import Frequency
from src.utils.decimal_utils import coerce_decimal


def monthly_equivalent(amount: Decimal, frequency: Frequency | str) -> Decimal:
    """Return the average monthly value of a recurring amount.

    Args:
        amount: Amount paid each period.
        frequency: Period of the amount, as a Frequency or its raw tag.

    Returns:
        Decimal: Monthly amount, unrounded.

    Raises:
        UnknownFrequencyError: If the frequency tag is not supported.
    """
    multiplier, divisor = MONTHLY_CONVERSION[Frequency.parse(frequency)]
    value = coerce_decimal(amount) * multiplier
    if divisor != 1:
        value = value / divisor
    return value


__all__ = ["monthly_equivalent"]
