"""Domain package for budget rules and core models."""

from .constants import (
    AU_TAX_BRACKETS,
    DEFAULT_CURRENCY,
    DEFAULT_STORAGE_KEY,
    MONTHLY_CONVERSION,
)
from .errors import (
    BudgetError,
    InvalidInputError,
    NegativeSalaryError,
    UnknownFrequencyError,
)
from .models import (
    BudgetInputRecord,
    BudgetSnapshot,
    BudgetSummary,
    ExpenseEntry,
    Frequency,
    TaxBracket,
)
from .services import (
    compute_budget_summary,
    monthly_equivalent,
    monthly_rental_income,
    monthly_salary_after_tax,
    monthly_spend_available,
    monthly_spend_before_savings,
    total_monthly_expenses,
    yearly_income_tax,
)

__all__ = [
    "AU_TAX_BRACKETS",
    "DEFAULT_CURRENCY",
    "DEFAULT_STORAGE_KEY",
    "MONTHLY_CONVERSION",
    "BudgetError",
    "InvalidInputError",
    "NegativeSalaryError",
    "UnknownFrequencyError",
    "BudgetInputRecord",
    "BudgetSnapshot",
    "BudgetSummary",
    "ExpenseEntry",
    "Frequency",
    "TaxBracket",
    "compute_budget_summary",
    "monthly_equivalent",
    "monthly_rental_income",
    "monthly_salary_after_tax",
    "monthly_spend_available",
    "monthly_spend_before_savings",
    "total_monthly_expenses",
    "yearly_income_tax",
]
