"""Use case to read the stored budget."""

from src.application.ports.budget_store import BudgetStorePort
from src.domain.models import BudgetSnapshot
from src.infrastructure.logging.logger import get_app_logger


class GetBudgetSnapshotUseCase:
    """Return the budget inputs and summary saved by the last submission."""

    def __init__(self, store: BudgetStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port used to read the budget.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> BudgetSnapshot:
        """Return the stored budget snapshot."""
        snapshot = self._store.load()
        if snapshot.summary is None:
            self._logger.info("No stored budget summary; using empty inputs")
        return snapshot


__all__ = ["GetBudgetSnapshotUseCase"]
