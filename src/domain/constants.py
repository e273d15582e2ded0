"""Domain constants for the budget calculator."""

from decimal import Decimal

from src.domain.models.budget import Frequency, TaxBracket

# Australian resident rates, 2023-2024 income year.
AU_TAX_BRACKETS = (
    TaxBracket(threshold=Decimal("18200"), rate=Decimal("0")),
    TaxBracket(threshold=Decimal("45000"), rate=Decimal("0.19")),
    TaxBracket(threshold=Decimal("120000"), rate=Decimal("0.325")),
    TaxBracket(threshold=Decimal("180000"), rate=Decimal("0.37")),
    TaxBracket(threshold=Decimal("Infinity"), rate=Decimal("0.45")),
)

MONTHS_PER_YEAR = Decimal("12")
WEEKS_PER_YEAR = Decimal("52")

# (multiplier, divisor) applied to reach a monthly amount.
MONTHLY_CONVERSION = {
    Frequency.DAILY: (Decimal("30"), Decimal("1")),
    Frequency.WEEKLY: (Decimal("4"), Decimal("1")),
    Frequency.FORTNIGHTLY: (Decimal("2"), Decimal("1")),
    Frequency.MONTHLY: (Decimal("1"), Decimal("1")),
    Frequency.QUARTERLY: (Decimal("1"), Decimal("3")),
    Frequency.YEARLY: (Decimal("1"), Decimal("12")),
}

DEFAULT_STORAGE_KEY = "fudget"
DEFAULT_CURRENCY = "AUD"


__all__ = [
    "AU_TAX_BRACKETS",
    "MONTHS_PER_YEAR",
    "WEEKS_PER_YEAR",
    "MONTHLY_CONVERSION",
    "DEFAULT_STORAGE_KEY",
    "DEFAULT_CURRENCY",
]
