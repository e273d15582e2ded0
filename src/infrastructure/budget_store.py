"""Budget store implementations.

Every store keeps the budget as one JSON payload under a logical key, the
same flat structure regardless of the backend.
"""

import json
from pathlib import Path

from sqlalchemy import text

from src.application.ports.budget_store import BudgetStorePort
from src.application.ports.database import DatabaseEnginePort
from src.domain.constants import DEFAULT_STORAGE_KEY
from src.domain.models import BudgetInputRecord, BudgetSnapshot, BudgetSummary
from src.infrastructure.budget_payload import (
    build_payload,
    dumps_payload,
    empty_snapshot,
    loads_payload,
    parse_payload,
)
from src.infrastructure.logging.logger import get_app_logger

CREATE_BUDGET_STORE_SQL = """
CREATE TABLE IF NOT EXISTS budget_store (
    storage_key TEXT PRIMARY KEY,
    payload TEXT NOT NULL
)
"""

SELECT_PAYLOAD_SQL = text(
    """
    SELECT payload
    FROM budget_store
    WHERE storage_key = :key
    """
)

DELETE_PAYLOAD_SQL = text(
    """
    DELETE FROM budget_store
    WHERE storage_key = :key
    """
)

INSERT_PAYLOAD_SQL = text(
    """
    INSERT INTO budget_store (storage_key, payload)
    VALUES (:key, :payload)
    """
)


def _restore(raw, source: str, logger) -> BudgetSnapshot:
    """Parse a stored payload, falling back to empty inputs when unusable.

    Args:
        raw: JSON text, an already decoded mapping, or None when missing.
        source: Location shown in warnings.
        logger: Logger used for warnings.
    """
    if raw is None:
        return empty_snapshot()
    try:
        if isinstance(raw, str):
            return loads_payload(raw)
        return parse_payload(raw)
    except ValueError as exc:
        logger.warning(f"Ignoring unreadable budget payload in {source}: {exc}")
        return empty_snapshot()


class SqlAlchemyBudgetStore(BudgetStorePort):
    """Store backed by a key/value table reached through SQLAlchemy."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        storage_key: str = DEFAULT_STORAGE_KEY,
        logger=None,
    ) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the budget engine.
            storage_key: Logical key the budget is stored under.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._storage_key = storage_key
        self._logger = logger or get_app_logger()
        self._prepared = False

    def prepare(self) -> None:
        """Create the budget_store table if it does not exist."""
        if self._prepared:
            return
        engine = self._db_port.get_budget_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_BUDGET_STORE_SQL)
        self._prepared = True

    def load(self) -> BudgetSnapshot:
        """Return the stored budget, or empty inputs when nothing is stored."""
        self.prepare()
        engine = self._db_port.get_budget_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_PAYLOAD_SQL,
                {"key": self._storage_key},
            ).first()
        return _restore(
            row.payload if row is not None else None,
            f"budget_store[{self._storage_key}]",
            self._logger,
        )

    def save(self, record: BudgetInputRecord, summary: BudgetSummary) -> None:
        """Replace the stored budget with the given inputs and summary."""
        self.prepare()
        params = {
            "key": self._storage_key,
            "payload": dumps_payload(record, summary),
        }
        engine = self._db_port.get_budget_engine()
        with engine.begin() as conn:
            conn.execute(DELETE_PAYLOAD_SQL, {"key": self._storage_key})
            conn.execute(INSERT_PAYLOAD_SQL, params)
        self._logger.info(f"Saved budget under key '{self._storage_key}'")


class JsonFileBudgetStore(BudgetStorePort):
    """Store keeping budgets in a JSON document, one entry per key."""

    def __init__(
        self,
        path: Path | str,
        storage_key: str = DEFAULT_STORAGE_KEY,
        logger=None,
    ) -> None:
        """Initialize the store.

        Args:
            path: JSON document holding the stored budgets.
            storage_key: Logical key the budget is stored under.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._storage_key = storage_key
        self._logger = logger or get_app_logger()

    def _read_document(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                document = json.load(handle)
        except (json.JSONDecodeError, OSError) as exc:
            self._logger.warning(f"Cannot read budget file {self._path}: {exc}")
            return {}
        if not isinstance(document, dict):
            self._logger.warning(
                f"Budget file {self._path} does not hold an object"
            )
            return {}
        return document

    def load(self) -> BudgetSnapshot:
        """Return the stored budget, or empty inputs when nothing is stored."""
        raw = self._read_document().get(self._storage_key)
        return _restore(
            raw,
            f"{self._path}[{self._storage_key}]",
            self._logger,
        )

    def save(self, record: BudgetInputRecord, summary: BudgetSummary) -> None:
        """Replace the stored budget with the given inputs and summary."""
        document = self._read_document()
        document[self._storage_key] = build_payload(record, summary)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        # Write beside the target, then swap, so a failed write keeps old keys.
        staging = self._path.with_name(f"{self._path.name}.tmp")
        with staging.open("w", encoding="utf-8") as handle:
            json.dump(document, handle, indent=2, sort_keys=True)
        staging.replace(self._path)
        self._logger.info(
            f"Saved budget under key '{self._storage_key}' in {self._path}"
        )


class InMemoryBudgetStore(BudgetStorePort):
    """Store keeping budgets in a dictionary for the current process."""

    def __init__(
        self,
        storage_key: str = DEFAULT_STORAGE_KEY,
        entries: dict[str, str] | None = None,
        logger=None,
    ) -> None:
        self._storage_key = storage_key
        self._entries = entries if entries is not None else {}
        self._logger = logger or get_app_logger()

    def load(self) -> BudgetSnapshot:
        """Return the stored budget, or empty inputs when nothing is stored."""
        return _restore(
            self._entries.get(self._storage_key),
            f"memory[{self._storage_key}]",
            self._logger,
        )

    def save(self, record: BudgetInputRecord, summary: BudgetSummary) -> None:
        """Replace the stored budget with the given inputs and summary."""
        self._entries[self._storage_key] = dumps_payload(record, summary)


__all__ = [
    "SqlAlchemyBudgetStore",
    "JsonFileBudgetStore",
    "InMemoryBudgetStore",
    "CREATE_BUDGET_STORE_SQL",
    "SELECT_PAYLOAD_SQL",
    "DELETE_PAYLOAD_SQL",
    "INSERT_PAYLOAD_SQL",
]
