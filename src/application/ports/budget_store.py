"""Port for persisting budget inputs and their summary."""

from typing import Protocol

from src.domain.models import BudgetInputRecord, BudgetSnapshot, BudgetSummary


class BudgetStorePort(Protocol):
    """Port exposing read and write access to the stored budget.

    A store keeps a single budget under one logical key. Saving overwrites
    the previous inputs and summary in full.
    """

    def load(self) -> BudgetSnapshot:
        """Return the stored budget, or empty inputs when nothing is stored."""

    def save(self, record: BudgetInputRecord, summary: BudgetSummary) -> None:
        """Replace the stored budget with the given inputs and summary."""


__all__ = ["BudgetStorePort"]
