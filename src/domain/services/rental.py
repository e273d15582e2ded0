"""Rental income normalization."""

from decimal import Decimal

from src.domain.constants import MONTHS_PER_YEAR, WEEKS_PER_YEAR
from src.utils.decimal_utils import coerce_decimal, round_money


def monthly_rental_income(weekly_rental: Decimal) -> Decimal:
    """Convert weekly rent into a monthly amount over a 52-week year.

    Args:
        weekly_rental: Rent received each week. Negative values are not
            rejected.

    Returns:
        Decimal: Monthly rental income rounded to cents.
    """
    weekly = coerce_decimal(weekly_rental)
    return round_money(weekly * WEEKS_PER_YEAR / MONTHS_PER_YEAR)


__all__ = ["monthly_rental_income"]
