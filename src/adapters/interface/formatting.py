"""Display formatting shared by the CLI and the Streamlit form."""

from decimal import Decimal

from src.domain.constants import DEFAULT_CURRENCY
from src.utils.decimal_utils import round_money

CURRENCY_SYMBOLS = {
    "AUD": "$",
    "USD": "$",
    "NZD": "$",
    "EUR": "€",
    "GBP": "£",
}


def format_currency(
    value: Decimal,
    currency_code: str = DEFAULT_CURRENCY,
) -> str:
    """Format an amount like ``$1,234.56`` (or ``1,234.56 CHF``)."""
    if value.is_nan():
        return "NaN"
    symbol = CURRENCY_SYMBOLS.get(currency_code)
    sign = "-" if value < 0 else ""
    amount = f"{abs(round_money(value)):,.2f}"
    if symbol is None:
        return f"{sign}{amount} {currency_code}"
    return f"{sign}{symbol}{amount}"


def format_percent(value: Decimal) -> str:
    """Format a percentage value for display."""
    if value.is_nan():
        return "NaN"
    return f"{value:.2f}%"


__all__ = ["CURRENCY_SYMBOLS", "format_currency", "format_percent"]
