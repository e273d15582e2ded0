"""Composition root for wiring infrastructure adapters."""

from src.application.ports.budget_store import BudgetStorePort
from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.budget_store import (
    InMemoryBudgetStore,
    JsonFileBudgetStore,
    SqlAlchemyBudgetStore,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings


def build_database_adapter(
    settings: BudgetSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    resolved = settings or BudgetSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(resolved.db_url)


def build_budget_store(
    settings: BudgetSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> BudgetStorePort:
    """Return the budget store selected by the settings.

    Args:
        settings: Optional settings; read from the environment when omitted.
        db_port: Optional database port for the sqlalchemy backend.

    Returns:
        BudgetStorePort: Concrete store implementation.

    Raises:
        ValueError: If the backend is not supported.
    """
    resolved = settings or BudgetSettings.from_env()
    logger = get_app_logger()
    if resolved.backend == "sqlalchemy":
        return SqlAlchemyBudgetStore(
            db_port or build_database_adapter(resolved),
            storage_key=resolved.storage_key,
            logger=logger,
        )
    if resolved.backend == "json":
        return JsonFileBudgetStore(
            resolved.json_file,
            storage_key=resolved.storage_key,
            logger=logger,
        )
    if resolved.backend == "memory":
        return InMemoryBudgetStore(storage_key=resolved.storage_key, logger=logger)
    raise ValueError(
        "Unsupported budget store backend: "
        f"{resolved.backend}. Expected sqlalchemy, json or memory."
    )


__all__ = ["build_database_adapter", "build_budget_store"]
