"""Display-time figures derived from a stored summary."""

from decimal import Decimal

from src.domain.models import BudgetSummary


def monthly_spend_available(summary: BudgetSummary) -> Decimal:
    """Return income left after target savings and expenses."""
    return (
        summary.total_monthly_income
        - summary.target_monthly_savings
        - summary.total_monthly_expenses
    )


def monthly_spend_before_savings(summary: BudgetSummary) -> Decimal:
    """Return income left after expenses, ignoring the savings target."""
    return summary.total_monthly_income - summary.total_monthly_expenses


__all__ = ["monthly_spend_available", "monthly_spend_before_savings"]
