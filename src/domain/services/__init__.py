"""Domain services package."""

from .budget import compute_budget_summary, total_monthly_expenses
from .frequency import monthly_equivalent
from .remainder import monthly_spend_available, monthly_spend_before_savings
from .rental import monthly_rental_income
from .tax import monthly_salary_after_tax, yearly_income_tax

__all__ = [
    "compute_budget_summary",
    "total_monthly_expenses",
    "monthly_equivalent",
    "monthly_spend_available",
    "monthly_spend_before_savings",
    "monthly_rental_income",
    "monthly_salary_after_tax",
    "yearly_income_tax",
]
