"""Application ports package."""

from .budget_store import BudgetStorePort
from .database import DatabaseEnginePort

__all__ = [
    "BudgetStorePort",
    "DatabaseEnginePort",
]
