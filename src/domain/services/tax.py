"""Progressive income tax calculations."""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.constants import AU_TAX_BRACKETS, MONTHS_PER_YEAR
from src.domain.errors import NegativeSalaryError
from src.domain.models import TaxBracket
from src.utils.decimal_utils import NAN, coerce_decimal, round_money


def yearly_income_tax(
    yearly_salary: Decimal,
    brackets: Sequence[TaxBracket] = AU_TAX_BRACKETS,
) -> Decimal:
    """Compute the yearly tax owed on a gross salary.

    Each bracket taxes the slice of income between the previous threshold and
    its own. Evaluation stops at the bracket the salary falls into.

    Args:
        yearly_salary: Gross yearly salary.
        brackets: Brackets ordered by ascending threshold, the last one
            unbounded.

    Returns:
        Decimal: Total yearly tax, unrounded.

    Raises:
        NegativeSalaryError: If the salary is below zero.
    """
    salary = coerce_decimal(yearly_salary)
    if salary.is_nan():
        return NAN
    if salary < 0:
        raise NegativeSalaryError()

    tax = Decimal("0")
    previous_threshold = Decimal("0")
    for bracket in brackets:
        if salary > bracket.threshold:
            tax += (bracket.threshold - previous_threshold) * bracket.rate
            previous_threshold = bracket.threshold
        else:
            tax += (salary - previous_threshold) * bracket.rate
            break
    return tax


def monthly_salary_after_tax(
    yearly_salary: Decimal,
    brackets: Sequence[TaxBracket] = AU_TAX_BRACKETS,
) -> Decimal:
    """Return the net monthly salary for a gross yearly salary.

    Args:
        yearly_salary: Gross yearly salary.
        brackets: Tax brackets to apply.

    Returns:
        Decimal: Net monthly salary rounded to cents.

    Raises:
        NegativeSalaryError: If the salary is below zero.
    """
    salary = coerce_decimal(yearly_salary)
    tax = yearly_income_tax(salary, brackets)
    if tax.is_infinite():
        # Infinite salary minus infinite tax has no defined value.
        return NAN
    return round_money((salary - tax) / MONTHS_PER_YEAR)


__all__ = ["yearly_income_tax", "monthly_salary_after_tax"]
