"""Flat key/value payload shared by the budget stores.

The payload is the submitted form values merged with the summary fields,
e.g.::

    {
        "yearlySalary": "90000",
        "weeklyRental": "500",
        "savingsTarget": "20",
        "expenses": [{"name": "Food", "amount": "200", "frequency": "weekly"}],
        "monthlySalaryIncome": "5856.92",
        ...
    }

Amounts are written as strings to keep Decimal precision in JSON.
"""

import json
from typing import Any

from src.application.use_cases.form_values import (
    parse_budget_form,
    record_to_form,
)
from src.domain.models import BudgetInputRecord, BudgetSnapshot, BudgetSummary
from src.utils.decimal_utils import parse_amount

SUMMARY_FIELDS = {
    "monthlySalaryIncome": "monthly_salary_income",
    "monthlyRentalIncome": "monthly_rental_income",
    "totalMonthlyIncome": "total_monthly_income",
    "targetMonthlySavings": "target_monthly_savings",
    "totalMonthlyExpenses": "total_monthly_expenses",
}

FORM_FIELDS = ("yearlySalary", "weeklyRental", "savingsTarget")


def build_payload(
    record: BudgetInputRecord,
    summary: BudgetSummary,
) -> dict[str, Any]:
    """Merge form values and summary fields into one flat mapping."""
    payload = record_to_form(record)
    for key, attribute in SUMMARY_FIELDS.items():
        payload[key] = str(getattr(summary, attribute))
    return payload


def parse_payload(payload: Any) -> BudgetSnapshot:
    """Rebuild a BudgetSnapshot from a stored payload.

    Missing or empty form fields load as ``"0"``. The summary is only
    restored when every summary field is present.

    Raises:
        ValueError: If the payload is not a mapping or holds invalid values.
    """
    if not isinstance(payload, dict):
        raise ValueError(
            f"Budget payload must be an object, got {type(payload).__name__}"
        )
    expenses = payload.get("expenses") or []
    if not isinstance(expenses, list) or not all(
        isinstance(row, dict) for row in expenses
    ):
        raise ValueError("Budget payload expenses must be a list of objects")
    form_values = dict(payload)
    for key in FORM_FIELDS:
        if form_values.get(key) in (None, ""):
            form_values[key] = "0"
    record = parse_budget_form(form_values)
    summary = None
    if all(key in payload for key in SUMMARY_FIELDS):
        summary = BudgetSummary(
            **{
                attribute: parse_amount(payload[key])
                for key, attribute in SUMMARY_FIELDS.items()
            }
        )
    return BudgetSnapshot(record=record, summary=summary)


def dumps_payload(record: BudgetInputRecord, summary: BudgetSummary) -> str:
    """Serialize the merged payload to JSON text."""
    return json.dumps(build_payload(record, summary), sort_keys=True)


def loads_payload(text: str) -> BudgetSnapshot:
    """Deserialize JSON text into a BudgetSnapshot.

    Raises:
        ValueError: If the text is not valid JSON or not a budget payload.
    """
    return parse_payload(json.loads(text))


def empty_snapshot() -> BudgetSnapshot:
    """Return the snapshot used when nothing has been stored."""
    return BudgetSnapshot(record=BudgetInputRecord.empty())


__all__ = [
    "SUMMARY_FIELDS",
    "FORM_FIELDS",
    "build_payload",
    "parse_payload",
    "dumps_payload",
    "loads_payload",
    "empty_snapshot",
]
