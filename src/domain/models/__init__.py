"""Domain models package."""

from .budget import (
    BudgetInputRecord,
    BudgetSnapshot,
    BudgetSummary,
    ExpenseEntry,
    Frequency,
    TaxBracket,
)

__all__ = [
    "BudgetInputRecord",
    "BudgetSnapshot",
    "BudgetSummary",
    "ExpenseEntry",
    "Frequency",
    "TaxBracket",
]
