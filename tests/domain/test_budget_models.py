"""Tests for the budget domain models."""

from decimal import Decimal

import pytest

from src.domain.errors import UnknownFrequencyError
from src.domain.models import BudgetInputRecord, ExpenseEntry, Frequency


def test_frequency_parse_accepts_members_and_tags() -> None:
    """Both enum members and their string values are accepted."""
    assert Frequency.parse(Frequency.WEEKLY) is Frequency.WEEKLY
    assert Frequency.parse("fortnightly") is Frequency.FORTNIGHTLY


@pytest.mark.parametrize("raw", ["Weekly", "hourly", "", None, 7])
def test_frequency_parse_rejects_unknown_tags(raw) -> None:
    """Anything outside the six tags is rejected."""
    with pytest.raises(UnknownFrequencyError):
        Frequency.parse(raw)


def test_empty_record_defaults_to_zero() -> None:
    """The initial record holds zeros and no expenses."""
    record = BudgetInputRecord.empty()

    assert record.yearly_salary == 0
    assert record.weekly_rental == 0
    assert record.savings_target_percent == 0
    assert record.expenses == []


def test_add_update_and_remove_expenses() -> None:
    """Expense rows can be added, edited in place and removed."""
    record = BudgetInputRecord.empty()

    blank = record.add_expense()
    assert blank.name == ""
    assert blank.amount.is_nan()
    assert blank.frequency is Frequency.MONTHLY

    record.add_expense(ExpenseEntry(name="Rent", amount=Decimal("400")))
    updated = record.update_expense(0, name="Phone", frequency="quarterly")

    assert updated.name == "Phone"
    assert updated.frequency is Frequency.QUARTERLY
    assert record.expenses[0] is updated

    removed = record.remove_expense(0)
    assert removed is updated
    assert [expense.name for expense in record.expenses] == ["Rent"]


def test_update_expense_rejects_unknown_frequency() -> None:
    """Editing a row with an invalid tag fails and keeps the row."""
    record = BudgetInputRecord.empty()
    record.add_expense(ExpenseEntry(name="Rent", amount=Decimal("400")))

    with pytest.raises(UnknownFrequencyError):
        record.update_expense(0, frequency="hourly")

    assert record.expenses[0].frequency is Frequency.MONTHLY


def test_expense_entry_coerces_frequency_tags() -> None:
    """String tags become Frequency members on construction."""
    entry = ExpenseEntry(name="Food", amount=Decimal("200"), frequency="weekly")

    assert entry.frequency is Frequency.WEEKLY
    assert entry.frequency.value == "weekly"


def test_expense_entry_rejects_unknown_frequency() -> None:
    """Unknown tags cannot be stored on an expense."""
    with pytest.raises(UnknownFrequencyError):
        ExpenseEntry(name="Gym", amount=Decimal("30"), frequency="hourly")
