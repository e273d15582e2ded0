"""Aggregation of incomes, savings and expenses into a monthly summary."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import BudgetInputRecord, BudgetSummary, ExpenseEntry
from src.domain.services.frequency import monthly_equivalent
from src.domain.services.rental import monthly_rental_income
from src.domain.services.tax import monthly_salary_after_tax
from src.utils.decimal_utils import coerce_decimal

HUNDRED = Decimal("100")


def total_monthly_expenses(expenses: Iterable[ExpenseEntry]) -> Decimal:
    """Sum the monthly equivalents of all expenses.

    Raises:
        UnknownFrequencyError: If any expense has an unsupported frequency.
    """
    return sum(
        (
            monthly_equivalent(expense.amount, expense.frequency)
            for expense in expenses
        ),
        Decimal("0"),
    )


def compute_budget_summary(record: BudgetInputRecord) -> BudgetSummary:
    """Compute the monthly budget summary for a set of inputs.

    Salary and rental are rounded to cents before being added together, so
    the total income can differ by a cent from rounding the exact sum.

    Args:
        record: User inputs.

    Returns:
        BudgetSummary: Derived monthly figures.

    Raises:
        NegativeSalaryError: If the yearly salary is below zero.
        UnknownFrequencyError: If any expense has an unsupported frequency.
    """
    rental_income = monthly_rental_income(record.weekly_rental)
    salary_income = monthly_salary_after_tax(record.yearly_salary)
    total_income = salary_income + rental_income
    savings_rate = coerce_decimal(record.savings_target_percent) / HUNDRED
    return BudgetSummary(
        monthly_salary_income=salary_income,
        monthly_rental_income=rental_income,
        total_monthly_income=total_income,
        target_monthly_savings=total_income * savings_rate,
        total_monthly_expenses=total_monthly_expenses(record.expenses),
    )


__all__ = ["compute_budget_summary", "total_monthly_expenses"]
