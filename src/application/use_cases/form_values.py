"""Conversion between raw form values and budget inputs.

The form (and the stored payload) uses these keys:

* ``yearlySalary``, ``weeklyRental``, ``savingsTarget``: numeric strings;
* ``expenses``: list of ``{"name", "amount", "frequency"}`` mappings.

Numeric strings that cannot be parsed become NaN. Unknown frequency tags
raise ``UnknownFrequencyError``.
"""

import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from src.domain.models import BudgetInputRecord, ExpenseEntry, Frequency
from src.utils.decimal_utils import parse_amount

_NON_NUMERIC = re.compile(r"[^0-9.]")


def sanitize_numeric_input(raw: str | None) -> str:
    """Strip everything except digits and dots from a typed value."""
    return _NON_NUMERIC.sub("", raw or "")


def parse_expense(values: Mapping[str, Any]) -> ExpenseEntry:
    """Build an expense entry from a form row."""
    return ExpenseEntry(
        name=str(values.get("name") or ""),
        amount=parse_amount(values.get("amount")),
        frequency=Frequency.parse(values.get("frequency", Frequency.MONTHLY)),
    )


def parse_budget_form(values: Mapping[str, Any]) -> BudgetInputRecord:
    """Build a BudgetInputRecord from raw form values.

    Missing or empty numeric fields become NaN, like any other value that
    cannot be parsed. A missing expense list defaults to empty.

    Args:
        values: Raw form values.

    Returns:
        BudgetInputRecord: Parsed inputs.

    Raises:
        UnknownFrequencyError: If an expense row has an unsupported frequency.
    """
    raw_expenses = values.get("expenses") or []
    return BudgetInputRecord(
        yearly_salary=parse_amount(values.get("yearlySalary")),
        weekly_rental=parse_amount(values.get("weeklyRental")),
        savings_target_percent=parse_amount(values.get("savingsTarget")),
        expenses=[parse_expense(row) for row in raw_expenses],
    )


def format_form_amount(value: Decimal) -> str:
    """Render an amount back into a form string (NaN as blank)."""
    if value.is_nan():
        return ""
    return str(value)


def record_to_form(record: BudgetInputRecord) -> dict[str, Any]:
    """Serialize a BudgetInputRecord into form values."""
    return {
        "yearlySalary": format_form_amount(record.yearly_salary),
        "weeklyRental": format_form_amount(record.weekly_rental),
        "savingsTarget": format_form_amount(record.savings_target_percent),
        "expenses": [
            {
                "name": expense.name,
                "amount": format_form_amount(expense.amount),
                "frequency": Frequency.parse(expense.frequency).value,
            }
            for expense in record.expenses
        ],
    }


__all__ = [
    "sanitize_numeric_input",
    "parse_expense",
    "parse_budget_form",
    "format_form_amount",
    "record_to_form",
]
