"""Domain models for budget inputs and derived figures."""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum

from src.domain.errors import UnknownFrequencyError


@dataclass(frozen=True)
class TaxBracket:
    """Marginal tax rate applied up to an upper threshold.

    Attributes:
        threshold: Inclusive upper bound of the slice (Infinity for the last).
        rate: Fraction of the slice taken as tax.
    """

    threshold: Decimal
    rate: Decimal


class Frequency(str, Enum):
    """How often a recurring expense is paid."""

    DAILY = "daily"
    WEEKLY = "weekly"
    FORTNIGHTLY = "fortnightly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"

    @classmethod
    def parse(cls, raw) -> "Frequency":
        """Return the frequency matching a raw tag.

        Args:
            raw: Frequency member or its string value.

        Returns:
            Frequency: Matching member.

        Raises:
            UnknownFrequencyError: If the tag is not supported.
        """
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except ValueError as exc:
            raise UnknownFrequencyError(raw) from exc


@dataclass
class ExpenseEntry:
    """A recurring expense row entered by the user."""

    name: str
    amount: Decimal
    frequency: Frequency = Frequency.MONTHLY

    def __post_init__(self) -> None:
        self.frequency = Frequency.parse(self.frequency)


@dataclass
class BudgetInputRecord:
    """Everything the user enters before asking for a summary.

    Attributes:
        yearly_salary: Gross yearly salary.
        weekly_rental: Rental income received each week.
        savings_target_percent: Share of monthly income to save (0-100 expected).
        expenses: Recurring expenses in entry order.
    """

    yearly_salary: Decimal
    weekly_rental: Decimal
    savings_target_percent: Decimal
    expenses: list[ExpenseEntry] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "BudgetInputRecord":
        """Return the record shown before anything was submitted."""
        return cls(
            yearly_salary=Decimal("0"),
            weekly_rental=Decimal("0"),
            savings_target_percent=Decimal("0"),
        )

    def add_expense(self, entry: ExpenseEntry | None = None) -> ExpenseEntry:
        """Append an expense row, blank and monthly unless given."""
        if entry is None:
            entry = ExpenseEntry(name="", amount=Decimal("NaN"))
        self.expenses.append(entry)
        return entry

    def remove_expense(self, index: int) -> ExpenseEntry:
        """Remove and return the expense row at index."""
        return self.expenses.pop(index)

    def update_expense(self, index: int, **changes) -> ExpenseEntry:
        """Replace fields of the expense row at index."""
        updated = replace(self.expenses[index], **changes)
        self.expenses[index] = updated
        return updated


@dataclass(frozen=True)
class BudgetSummary:
    """Monthly figures derived from a BudgetInputRecord.

    Salary and rental incomes are rounded to cents; the total income is the
    sum of those rounded values. Savings and expenses are not rounded.
    """

    monthly_salary_income: Decimal
    monthly_rental_income: Decimal
    total_monthly_income: Decimal
    target_monthly_savings: Decimal
    total_monthly_expenses: Decimal


@dataclass(frozen=True)
class BudgetSnapshot:
    """Persisted inputs together with the summary computed from them."""

    record: BudgetInputRecord
    summary: BudgetSummary | None = None


__all__ = [
    "TaxBracket",
    "Frequency",
    "ExpenseEntry",
    "BudgetInputRecord",
    "BudgetSummary",
    "BudgetSnapshot",
]
