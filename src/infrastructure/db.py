"""Database infrastructure for the budget calculator.

This module exposes concrete helpers to create the SQLAlchemy engine backing
the SQL budget store. It belongs to the infrastructure layer because it deals
with external systems (SQLite by default, any SQLAlchemy URL otherwise).
"""

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _ensure_sqlite_directory(db_url: str) -> None:
    """Create the parent directory of a file-based SQLite database."""
    url = make_url(db_url)
    if url.get_backend_name() != "sqlite":
        return
    if not url.database or url.database == ":memory:":
        return
    Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    _ensure_sqlite_directory(db_url)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The engine is created lazily on first use and reused afterwards, so
    stores can depend only on the protocol.
    """

    def __init__(self, db_url: str) -> None:
        self._db_url = db_url
        self._engine: Engine | None = None

    def get_budget_engine(self) -> Engine:
        """Get the engine for the budget database.

        Returns:
            Engine: SQLAlchemy engine connected to the budget storage.
        """
        if self._engine is None:
            self._engine = _create_engine(self._db_url)
        return self._engine


__all__ = ["SqlAlchemyDatabaseEngineAdapter"]
