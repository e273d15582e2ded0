"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
import os
from pathlib import Path
from urllib.parse import unquote, urlparse

import dotenv

from src.domain.constants import DEFAULT_CURRENCY, DEFAULT_STORAGE_KEY
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

SUPPORTED_BACKENDS = ("sqlalchemy", "json", "memory")


def _default_db_url() -> str:
    """Return the sqlite URL used when BUDGET_DB_URL is not set."""
    return f"sqlite:///{get_project_root() / 'data' / 'budget.db'}"


def _default_json_file() -> Path:
    """Return the JSON document used when BUDGET_JSON_FILE is not set."""
    return get_project_root() / "data" / "budget.json"


@dataclass(frozen=True)
class BudgetSettings:
    """Settings for selecting and configuring the budget store.

    Attributes:
        backend: Store identifier (sqlalchemy, json, or memory).
        db_url: SQLAlchemy URL used by the sqlalchemy backend.
        json_file: Path to the document used by the json backend.
        storage_key: Logical key the budget is stored under.
        currency_code: Currency used when displaying amounts.
    """

    backend: str = "sqlalchemy"
    db_url: str = field(default_factory=_default_db_url)
    json_file: Path = field(default_factory=_default_json_file)
    storage_key: str = DEFAULT_STORAGE_KEY
    currency_code: str = DEFAULT_CURRENCY

    @classmethod
    def from_env(cls) -> "BudgetSettings":
        """Build settings from environment variables (and a .env file).

        Returns:
            BudgetSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("BUDGET_STORE_BACKEND", "sqlalchemy").strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            logger.warning(
                f"Unknown BUDGET_STORE_BACKEND '{backend}'. "
                f"Expected one of {', '.join(SUPPORTED_BACKENDS)}."
            )
        db_url = os.getenv("BUDGET_DB_URL") or _default_db_url()
        raw_json = os.getenv("BUDGET_JSON_FILE")
        json_file = (
            cls._normalize_path(raw_json) if raw_json else _default_json_file()
        )
        storage_key = (
            os.getenv("BUDGET_STORAGE_KEY", "").strip() or DEFAULT_STORAGE_KEY
        )
        currency_code = (
            os.getenv("BUDGET_CURRENCY", "").strip().upper() or DEFAULT_CURRENCY
        )
        return cls(
            backend=backend,
            db_url=db_url,
            json_file=json_file,
            storage_key=storage_key,
            currency_code=currency_code,
        )

    @staticmethod
    def _normalize_path(raw_path: str) -> Path:
        """Normalize a filesystem path or file:// URI.

        Args:
            raw_path: Raw file path string.

        Returns:
            Path: Absolute filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        return Path(raw_path).expanduser().resolve()


__all__ = ["BudgetSettings", "SUPPORTED_BACKENDS"]
