"""Tests for the budget summary aggregation and display formulas."""

from decimal import Decimal

import pytest

from src.domain.errors import NegativeSalaryError, UnknownFrequencyError
from src.domain.models import BudgetInputRecord, BudgetSummary, ExpenseEntry
from src.domain.services import (
    compute_budget_summary,
    monthly_spend_available,
    monthly_spend_before_savings,
)


def _record(**overrides) -> BudgetInputRecord:
    values = {
        "yearly_salary": Decimal("90000"),
        "weekly_rental": Decimal("500"),
        "savings_target_percent": Decimal("20"),
        "expenses": [
            ExpenseEntry(name="Groceries", amount=Decimal("200"), frequency="weekly")
        ],
    }
    values.update(overrides)
    return BudgetInputRecord(**values)


def test_compute_budget_summary_end_to_end() -> None:
    """Salary, rental, savings and expenses combine into monthly figures."""
    summary = compute_budget_summary(_record())

    assert summary.monthly_salary_income == Decimal("5856.92")
    assert summary.monthly_rental_income == Decimal("2166.67")
    assert summary.total_monthly_income == Decimal("8023.59")
    assert summary.target_monthly_savings == Decimal("1604.718")
    assert summary.total_monthly_expenses == Decimal("800")


def test_total_income_sums_rounded_components() -> None:
    """Total income is the sum of already rounded salary and rental."""
    summary = compute_budget_summary(
        _record(
            yearly_salary=Decimal("10"),
            weekly_rental=Decimal("1"),
            expenses=[],
        )
    )

    # 10 / 12 = 0.8333 and 52 / 12 = 4.3333: rounding first gives 5.16,
    # rounding the exact sum would give 5.17.
    assert summary.monthly_salary_income == Decimal("0.83")
    assert summary.monthly_rental_income == Decimal("4.33")
    assert summary.total_monthly_income == Decimal("5.16")


def test_empty_expense_list_yields_zero_expenses() -> None:
    """No expenses means zero monthly expenses."""
    summary = compute_budget_summary(_record(expenses=[]))

    assert summary.total_monthly_expenses == 0


def test_expenses_are_summed_without_rounding() -> None:
    """Monthly equivalents are summed exactly."""
    summary = compute_budget_summary(
        _record(
            expenses=[
                ExpenseEntry(name="Insurance", amount=Decimal("100"), frequency="yearly"),
                ExpenseEntry(name="Coffee", amount=Decimal("5"), frequency="daily"),
            ]
        )
    )

    assert summary.total_monthly_expenses == Decimal("100") / 12 + 150


def test_invalid_frequency_aborts_the_whole_summary() -> None:
    """One bad expense fails the aggregation instead of a partial sum."""
    gym = ExpenseEntry(name="Gym", amount=Decimal("30"))
    gym.frequency = "hourly"
    record = _record(
        expenses=[
            ExpenseEntry(name="Rent", amount=Decimal("400"), frequency="weekly"),
            gym,
            ExpenseEntry(name="Phone", amount=Decimal("50"), frequency="monthly"),
        ]
    )

    with pytest.raises(UnknownFrequencyError):
        compute_budget_summary(record)


def test_negative_salary_aborts_the_summary() -> None:
    """Negative salaries propagate as errors."""
    with pytest.raises(NegativeSalaryError):
        compute_budget_summary(_record(yearly_salary=Decimal("-1")))


def test_nan_inputs_propagate_to_every_dependent_field() -> None:
    """NaN salary poisons income and savings but not expenses."""
    summary = compute_budget_summary(_record(yearly_salary=Decimal("NaN")))

    assert summary.monthly_salary_income.is_nan()
    assert summary.total_monthly_income.is_nan()
    assert summary.target_monthly_savings.is_nan()
    assert summary.total_monthly_expenses == Decimal("800")


def test_display_formulas() -> None:
    """Both observed display formulas are available."""
    summary = BudgetSummary(
        monthly_salary_income=Decimal("3000"),
        monthly_rental_income=Decimal("1000"),
        total_monthly_income=Decimal("4000"),
        target_monthly_savings=Decimal("800"),
        total_monthly_expenses=Decimal("1500"),
    )

    assert monthly_spend_available(summary) == Decimal("1700")
    assert monthly_spend_before_savings(summary) == Decimal("2500")
