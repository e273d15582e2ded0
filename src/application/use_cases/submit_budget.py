"""Use case to compute a budget summary from form values and store it."""

from collections.abc import Mapping
from typing import Any

from src.application.ports.budget_store import BudgetStorePort
from src.application.use_cases.form_values import parse_budget_form
from src.domain.errors import InvalidInputError
from src.domain.models import BudgetSnapshot
from src.domain.services import compute_budget_summary
from src.infrastructure.logging.logger import get_app_logger


class SubmitBudgetUseCase:
    """Parse submitted form values, compute the summary and persist both.

    The store is only written when the whole computation succeeds; invalid
    input leaves the previously stored budget untouched.
    """

    def __init__(self, store: BudgetStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port used to persist the budget.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, values: Mapping[str, Any]) -> BudgetSnapshot:
        """Compute and store the budget for the submitted values.

        Args:
            values: Raw form values.

        Returns:
            BudgetSnapshot: Parsed inputs and their computed summary.

        Raises:
            InvalidInputError: If the salary is negative or an expense has an
                unsupported frequency.
        """
        try:
            record = parse_budget_form(values)
            summary = compute_budget_summary(record)
        except InvalidInputError as exc:
            self._logger.warning(f"Budget submission rejected: {exc}")
            raise

        self._store.save(record, summary)
        self._logger.info(
            f"Budget computed: income={summary.total_monthly_income}, "
            f"savings={summary.target_monthly_savings}, "
            f"expenses={summary.total_monthly_expenses}, "
            f"expense_count={len(record.expenses)}"
        )
        return BudgetSnapshot(record=record, summary=summary)


__all__ = ["SubmitBudgetUseCase"]
