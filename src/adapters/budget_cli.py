"""CLI adapter to submit and display the stored budget.

Usage::

    python -m src.adapters.budget_cli show
    python -m src.adapters.budget_cli submit --salary 90000 --rental 500 \
        --savings 20 --expense "Groceries:200:weekly"
"""

import argparse
import sys

from src.adapters.interface.formatting import format_currency, format_percent
from src.application.use_cases.get_budget_snapshot import (
    GetBudgetSnapshotUseCase,
)
from src.application.use_cases.submit_budget import SubmitBudgetUseCase
from src.domain.errors import InvalidInputError
from src.domain.models import BudgetSnapshot
from src.domain.services import (
    monthly_spend_available,
    monthly_spend_before_savings,
)
from src.infrastructure.container import build_budget_store
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings


def _parse_expense(raw: str) -> dict[str, str]:
    """Parse a NAME:AMOUNT[:FREQUENCY] expense argument.

    Args:
        raw: Expense argument from the command line.

    Returns:
        dict[str, str]: Expense form row.

    Raises:
        argparse.ArgumentTypeError: If the argument has too few parts.
    """
    parts = raw.rsplit(":", 2)
    if len(parts) < 2:
        raise argparse.ArgumentTypeError(
            f"Invalid expense '{raw}'. Expected NAME:AMOUNT[:FREQUENCY]."
        )
    if len(parts) == 2:
        parts.append("monthly")
    name, amount, frequency = parts
    return {"name": name, "amount": amount, "frequency": frequency}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="budget",
        description="Compute a monthly budget from salary, rent and expenses.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("show", help="Display the stored budget.")

    submit = subparsers.add_parser("submit", help="Compute and store a budget.")
    submit.add_argument("--salary", default="0", help="Yearly gross salary.")
    submit.add_argument("--rental", default="0", help="Weekly rental income.")
    submit.add_argument(
        "--savings",
        default="0",
        help="Savings target as a percentage of monthly income.",
    )
    submit.add_argument(
        "--expense",
        action="append",
        default=[],
        type=_parse_expense,
        metavar="NAME:AMOUNT[:FREQUENCY]",
        help="Recurring expense; repeat for several expenses.",
    )
    return parser


def _print_snapshot(snapshot: BudgetSnapshot, currency_code: str) -> None:
    """Print stored inputs and the calculations section."""
    record = snapshot.record
    print(f"Yearly salary: {format_currency(record.yearly_salary, currency_code)}")
    print(f"Weekly rental: {format_currency(record.weekly_rental, currency_code)}")
    print(f"Savings target: {format_percent(record.savings_target_percent)}")
    for expense in record.expenses:
        label = expense.name or "(unnamed)"
        amount = format_currency(expense.amount, currency_code)
        print(f"  - {label}: {amount} {expense.frequency.value}")

    summary = snapshot.summary
    if summary is None:
        print("No budget computed yet. Run 'submit' first.")
        return
    print(
        "Monthly income: "
        f"{format_currency(summary.total_monthly_income, currency_code)} "
        f"(salary {format_currency(summary.monthly_salary_income, currency_code)}, "
        f"rental {format_currency(summary.monthly_rental_income, currency_code)})"
    )
    print(
        "Monthly expenses: "
        f"{format_currency(summary.total_monthly_expenses, currency_code)}"
    )
    print(
        "Savings: "
        f"{format_currency(summary.target_monthly_savings, currency_code)}"
    )
    print(
        "Monthly spend available: "
        f"{format_currency(monthly_spend_available(summary), currency_code)}"
    )
    print(
        "Before savings: "
        f"{format_currency(monthly_spend_before_savings(summary), currency_code)}"
    )


def main(argv: list[str] | None = None) -> int:
    """Run the budget CLI.

    Args:
        argv: Optional argument list (defaults to sys.argv).

    Returns:
        int: Process exit status.
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    settings = BudgetSettings.from_env()
    store = build_budget_store(settings)

    if args.command == "show":
        snapshot = GetBudgetSnapshotUseCase(store=store, logger=logger).execute()
        _print_snapshot(snapshot, settings.currency_code)
        return 0

    values = {
        "yearlySalary": args.salary,
        "weeklyRental": args.rental,
        "savingsTarget": args.savings,
        "expenses": args.expense,
    }
    try:
        snapshot = SubmitBudgetUseCase(store=store, logger=logger).execute(
            values
        )
    except InvalidInputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    _print_snapshot(snapshot, settings.currency_code)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
