"""Database ports for the budget calculator.

This module defines the application-layer protocol for accessing the
database engine behind the SQL budget store. Infrastructure implementations
are expected to provide concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine used to persist budgets.

    Stores can depend on this protocol instead of concrete database drivers
    or configuration details.
    """

    def get_budget_engine(self) -> Engine:
        """Get the engine for the budget database.

        Returns:
            Engine: SQLAlchemy engine connected to the budget storage.
        """


__all__ = ["DatabaseEnginePort"]
