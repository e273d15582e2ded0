"""Tests for the budget store implementations."""

import json
from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from src.application.use_cases.form_values import parse_budget_form
from src.domain.services import compute_budget_summary
from src.infrastructure.budget_store import (
    InMemoryBudgetStore,
    JsonFileBudgetStore,
    SqlAlchemyBudgetStore,
)


class _SqliteDbPort:
    """Database port backed by a private in-memory SQLite engine."""

    def __init__(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    def get_budget_engine(self):
        return self.engine


def _submission(salary: str = "90000"):
    record = parse_budget_form(
        {
            "yearlySalary": salary,
            "weeklyRental": "500",
            "savingsTarget": "20",
            "expenses": [
                {"name": "Groceries", "amount": "200", "frequency": "weekly"},
                {"name": "Insurance", "amount": "100", "frequency": "yearly"},
            ],
        }
    )
    return record, compute_budget_summary(record)


def test_sqlalchemy_store_returns_defaults_when_empty() -> None:
    """Loading before any save yields zeroed inputs and no summary."""
    store = SqlAlchemyBudgetStore(_SqliteDbPort(), logger=MagicMock())

    snapshot = store.load()

    assert snapshot.summary is None
    assert snapshot.record.yearly_salary == 0
    assert snapshot.record.expenses == []


def test_sqlalchemy_store_round_trips_and_overwrites() -> None:
    """Saving replaces the previous payload under the same key."""
    db_port = _SqliteDbPort()
    store = SqlAlchemyBudgetStore(db_port, logger=MagicMock())

    store.save(*_submission("50000"))
    record, summary = _submission("90000")
    store.save(record, summary)
    snapshot = store.load()

    assert snapshot.record == record
    assert snapshot.summary == summary
    with db_port.engine.connect() as conn:
        count = conn.exec_driver_sql("SELECT COUNT(*) FROM budget_store").scalar()
    assert count == 1


def test_sqlalchemy_store_keys_are_independent() -> None:
    """Different storage keys do not see each other's budgets."""
    db_port = _SqliteDbPort()
    first = SqlAlchemyBudgetStore(db_port, storage_key="a", logger=MagicMock())
    second = SqlAlchemyBudgetStore(db_port, storage_key="b", logger=MagicMock())

    first.save(*_submission())

    assert first.load().summary is not None
    assert second.load().summary is None


def test_json_store_writes_flat_payload(tmp_path: Path) -> None:
    """The JSON document keeps form values and summary fields together."""
    path = tmp_path / "nested" / "budget.json"
    store = JsonFileBudgetStore(path, logger=MagicMock())
    record, summary = _submission()

    store.save(record, summary)

    document = json.loads(path.read_text(encoding="utf-8"))
    payload = document["fudget"]
    assert isinstance(payload, dict)
    assert payload["yearlySalary"] == "90000"
    assert payload["expenses"][0]["frequency"] == "weekly"
    assert payload["monthlySalaryIncome"] == "5856.92"
    assert payload["monthlyRentalIncome"] == "2166.67"
    assert Decimal(payload["targetMonthlySavings"]) == Decimal("1604.718")
    assert store.load().summary == summary


def test_json_store_keeps_other_keys(tmp_path: Path) -> None:
    """Saving one key leaves the other entries of the document alone."""
    path = tmp_path / "budget.json"
    path.write_text(
        json.dumps({"household": {"yearlySalary": "1"}}),
        encoding="utf-8",
    )
    record, summary = _submission()

    JsonFileBudgetStore(path, logger=MagicMock()).save(record, summary)

    document = json.loads(path.read_text(encoding="utf-8"))
    assert document["household"] == {"yearlySalary": "1"}
    assert "fudget" in document
    assert list(tmp_path.iterdir()) == [path]


def test_json_store_failed_write_keeps_existing_file(
    monkeypatch, tmp_path: Path
) -> None:
    """A write that fails midway leaves the previous document intact."""
    path = tmp_path / "budget.json"
    previous = json.dumps({"household": {"yearlySalary": "1"}})
    path.write_text(previous, encoding="utf-8")
    record, summary = _submission()

    def _failing_dump(*_args, **_kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(json, "dump", _failing_dump)

    with pytest.raises(OSError):
        JsonFileBudgetStore(path, logger=MagicMock()).save(record, summary)

    assert path.read_text(encoding="utf-8") == previous


def test_json_store_reads_legacy_string_entries(tmp_path: Path) -> None:
    """Entries stored as JSON text are still understood."""
    path = tmp_path / "budget.json"
    path.write_text(
        json.dumps({"fudget": json.dumps({"yearlySalary": "1000"})}),
        encoding="utf-8",
    )

    snapshot = JsonFileBudgetStore(path, logger=MagicMock()).load()

    assert snapshot.record.yearly_salary == Decimal("1000")


def test_json_store_ignores_corrupt_file(tmp_path: Path) -> None:
    """Unreadable files load as defaults and log a warning."""
    path = tmp_path / "budget.json"
    path.write_text("{not json", encoding="utf-8")
    logger = MagicMock()

    snapshot = JsonFileBudgetStore(path, logger=logger).load()

    assert snapshot.summary is None
    logger.warning.assert_called_once()


def test_json_store_ignores_invalid_payload(tmp_path: Path) -> None:
    """Payloads with unknown frequencies load as defaults."""
    path = tmp_path / "budget.json"
    payload = {
        "yearlySalary": "1",
        "expenses": [{"name": "x", "amount": "1", "frequency": "hourly"}],
    }
    path.write_text(json.dumps({"fudget": payload}), encoding="utf-8")
    logger = MagicMock()

    snapshot = JsonFileBudgetStore(path, logger=logger).load()

    assert snapshot.record.yearly_salary == 0
    logger.warning.assert_called_once()


def test_memory_store_keeps_nan_values() -> None:
    """NaN summaries survive a save and load."""
    store = InMemoryBudgetStore(logger=MagicMock())
    record, summary = _submission("not a number")

    store.save(record, summary)
    snapshot = store.load()

    assert snapshot.summary.monthly_salary_income.is_nan()
    assert snapshot.summary.total_monthly_income.is_nan()
    assert snapshot.summary.target_monthly_savings.is_nan()
    assert snapshot.summary.total_monthly_expenses == summary.total_monthly_expenses
