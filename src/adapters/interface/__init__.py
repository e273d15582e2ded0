"""Interface adapters package."""

from .formatting import format_currency, format_percent

__all__ = ["format_currency", "format_percent"]
