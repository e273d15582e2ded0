"""Streamlit budget form entry point."""

from typing import Any
from uuid import uuid4

import streamlit as st

from src.adapters.interface.formatting import format_currency
from src.application.ports.budget_store import BudgetStorePort
from src.application.use_cases.form_values import (
    record_to_form,
    sanitize_numeric_input,
)
from src.application.use_cases.get_budget_snapshot import (
    GetBudgetSnapshotUseCase,
)
from src.application.use_cases.submit_budget import SubmitBudgetUseCase
from src.domain.errors import InvalidInputError
from src.domain.models import BudgetSnapshot, Frequency
from src.domain.services import (
    monthly_spend_available,
    monthly_spend_before_savings,
)
from src.infrastructure.container import build_budget_store
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import BudgetSettings

FREQUENCY_OPTIONS = [frequency.value for frequency in Frequency]
EXPENSES_STATE_KEY = "expenses"


def _new_expense_row() -> dict[str, str]:
    """Return the values of a freshly added expense row."""
    return {
        "id": uuid4().hex,
        "name": "",
        "amount": "",
        "frequency": Frequency.MONTHLY.value,
    }


@st.cache_resource(show_spinner=False)
def _load_settings() -> BudgetSettings:
    """Cached settings for the Streamlit session."""
    return BudgetSettings.from_env()


@st.cache_resource(show_spinner=False)
def _load_store() -> BudgetStorePort:
    """Cached budget store for the Streamlit session."""
    return build_budget_store(_load_settings())


def _fetch_snapshot(store: BudgetStorePort) -> BudgetSnapshot:
    """Read the stored budget."""
    return GetBudgetSnapshotUseCase(store=store).execute()


def _submit(
    store: BudgetStorePort,
    values: dict[str, Any],
) -> BudgetSnapshot | None:
    """Compute and store the budget, reporting invalid input to the user."""
    get_usage_logger().info(
        f"Budget submitted with {len(values['expenses'])} expenses"
    )
    try:
        return SubmitBudgetUseCase(store=store).execute(values)
    except InvalidInputError as exc:
        st.error(str(exc))
        return None


def _init_expense_rows(rows: list[dict[str, str]]) -> list[dict[str, str]]:
    """Seed the session with the stored expense rows on first render.

    Each row gets an ``id`` that keys its widgets, so removing a row never
    hands its widget state to the row that moves into its place.
    """
    if EXPENSES_STATE_KEY not in st.session_state:
        st.session_state[EXPENSES_STATE_KEY] = [
            {**row, "id": uuid4().hex} for row in rows
        ]
    return st.session_state[EXPENSES_STATE_KEY]


def _render_expenses(rows: list[dict[str, str]]) -> None:
    """Render editable expense rows with add and remove buttons."""
    remove_index = None
    for index, row in enumerate(rows):
        row_id = row["id"]
        name_col, amount_col, frequency_col, remove_col = st.columns(4)
        row["name"] = name_col.text_input(
            "Name",
            value=row["name"],
            key=f"expense-name-{row_id}",
        )
        row["amount"] = amount_col.text_input(
            "Amount",
            value=row["amount"],
            key=f"expense-amount-{row_id}",
        )
        current = row["frequency"]
        row["frequency"] = frequency_col.selectbox(
            "Frequency",
            options=FREQUENCY_OPTIONS,
            index=(
                FREQUENCY_OPTIONS.index(current)
                if current in FREQUENCY_OPTIONS
                else FREQUENCY_OPTIONS.index(Frequency.MONTHLY.value)
            ),
            format_func=str.capitalize,
            key=f"expense-frequency-{row_id}",
        )
        if remove_col.button("Remove", key=f"expense-remove-{row_id}"):
            remove_index = index

    if remove_index is not None:
        rows.pop(remove_index)
        st.rerun()
    if st.button("Add expense", key="add-expense"):
        rows.append(_new_expense_row())
        st.rerun()


def _render_calculations(
    snapshot: BudgetSnapshot,
    currency_code: str,
) -> None:
    """Render the savings and spend figures of the stored summary."""
    st.header("Calculations")
    summary = snapshot.summary
    if summary is None:
        st.info("Submit the form to see your calculations.")
        return
    savings_col, spend_col = st.columns(2)
    savings_col.metric(
        "Savings",
        format_currency(summary.target_monthly_savings, currency_code),
    )
    spend_col.metric(
        "Monthly spend available",
        format_currency(monthly_spend_available(summary), currency_code),
    )
    st.caption(
        "Income after expenses, before savings: "
        f"{format_currency(monthly_spend_before_savings(summary), currency_code)}"
    )


def main() -> None:
    """Render the budget form and the stored calculations."""
    st.set_page_config(page_title="Fudget", layout="centered")
    st.title("Fudget")

    settings = _load_settings()
    store = _load_store()
    snapshot = _fetch_snapshot(store)
    form_values = record_to_form(snapshot.record)
    rows = _init_expense_rows(form_values["expenses"])

    st.header("Income")
    salary = sanitize_numeric_input(
        st.text_input(
            "Yearly base salary",
            value=form_values["yearlySalary"] or "0",
            key="yearlySalary",
        )
    )
    rental = sanitize_numeric_input(
        st.text_input(
            "Weekly rental income",
            value=form_values["weeklyRental"] or "0",
            key="weeklyRental",
        )
    )

    st.header("Savings target percentage")
    st.caption("How much of your monthly income are you targeting to save?")
    savings = st.text_input(
        "Enter percentage",
        value=form_values["savingsTarget"] or "0",
        key="savingsTarget",
    )

    st.header("Expenses")
    _render_expenses(rows)

    if st.button("Submit", type="primary", key="submit"):
        submitted = _submit(
            store,
            {
                "yearlySalary": salary,
                "weeklyRental": rental,
                "savingsTarget": savings,
                "expenses": [dict(row) for row in rows],
            },
        )
        if submitted is not None:
            snapshot = submitted

    _render_calculations(snapshot, settings.currency_code)


if __name__ == "__main__":  # pragma: no cover
    main()
