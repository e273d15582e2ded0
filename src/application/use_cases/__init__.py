"""Application use cases package."""

from .form_values import (
    parse_budget_form,
    record_to_form,
    sanitize_numeric_input,
)
from .get_budget_snapshot import GetBudgetSnapshotUseCase
from .submit_budget import SubmitBudgetUseCase

__all__ = [
    "parse_budget_form",
    "record_to_form",
    "sanitize_numeric_input",
    "GetBudgetSnapshotUseCase",
    "SubmitBudgetUseCase",
]
