"""Simple CLI to validate the budget database connection.

This adapter is meant for local operations: it builds the configured
database adapter, runs a basic health check and makes sure the budget
table exists.
"""

from src.infrastructure.budget_store import SqlAlchemyBudgetStore
from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a connectivity check against the configured budget database."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_budget_engine()
    logger.info(f"Budget DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")
    SqlAlchemyBudgetStore(adapter, logger=logger).prepare()

    logger.info("Budget database is reachable and initialized.")


if __name__ == "__main__":  # pragma: no cover
    main()
