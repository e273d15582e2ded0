"""Domain errors raised by the budget calculations."""


class BudgetError(Exception):
    """Base class for budget calculator errors."""


class InvalidInputError(BudgetError, ValueError):
    """Input values cannot be used to compute a budget summary."""


class NegativeSalaryError(InvalidInputError):
    """Yearly salary is below zero."""

    def __init__(self) -> None:
        super().__init__("Yearly salary must be a non-negative value.")


class UnknownFrequencyError(InvalidInputError):
    """Expense frequency tag is not one of the supported values."""

    def __init__(self, frequency=None) -> None:
        super().__init__("Invalid frequency")
        self.frequency = frequency


__all__ = [
    "BudgetError",
    "InvalidInputError",
    "NegativeSalaryError",
    "UnknownFrequencyError",
]
