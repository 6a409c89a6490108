"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.build_period_report import (
    BuildPeriodReportUseCase,
    ExportPeriodReportUseCase,
)
from src.application.use_cases.compute_taxes import ComputeTaxesUseCase
from src.application.use_cases.get_budget_statuses import (
    GetBudgetStatusesUseCase,
    GetGoalStatusesUseCase,
)
from src.application.use_cases.get_category_breakdown import (
    GetCategoryBreakdownUseCase,
)
from src.application.use_cases.get_projection import GetProjectionUseCase
from src.application.use_cases.get_summary import GetSummaryUseCase
from src.application.use_cases.import_transactions import (
    ImportTransactionsUseCase,
)
from src.application.use_cases.load_ledger import LoadLedgerUseCase
from src.application.use_cases.record_entries import (
    AddGoalUseCase,
    AddInvestmentUseCase,
    AddTransactionUseCase,
    DeleteEntryUseCase,
    SetBudgetUseCase,
)
from src.domain.constants import REPORT_GRANULARITIES, TRANSACTION_TYPES
from src.domain.errors import LedgerStorageError, ValidationError
from src.domain.models import (
    BudgetStatus,
    CategoryAmount,
    Investment,
    LedgerSnapshot,
    PeriodReportRow,
    ProjectionPoint,
    Transaction,
)
from src.domain.policies.budget_alerts import ALERT_CRITICAL, ALERT_WARNING
from src.domain.services.evaluation import clamp_percentage
from src.domain.services.recurrence import resolve_end_date
from src.infrastructure.container import (
    build_ledger_repository,
    build_tax_table,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import FinanceSettings


PAGES = [
    "Dashboard",
    "Transactions",
    "Projections",
    "Taxes",
    "Reports",
    "Budgets & Goals",
]

TYPE_LABELS = {
    "fixed_income": "Fixed income",
    "variable_income": "Variable income",
    "fixed_expense": "Fixed expense",
    "variable_expense": "Variable expense",
}

CURRENCY_SYMBOLS = {"BRL": "R$", "EUR": "€", "USD": "$"}


def _build_repository() -> LedgerRepositoryPort:
    """Return a ledger repository with its schema ready."""
    repository = build_ledger_repository()
    repository.prepare_schema()
    return repository


def _fetch_snapshot(repository: LedgerRepositoryPort) -> LedgerSnapshot:
    """Load the ledger once for the current rerun."""
    return LoadLedgerUseCase(ledger_repository=repository).execute()


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that numpy and pandas are importable for Altair charts.

    Returns:
        tuple[bool, str | None]: Status flag and an error message.
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Charts need numpy and pandas: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy import is incomplete (missing ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas import is incomplete (missing Timestamp)."
    return True, None


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = CURRENCY_SYMBOLS.get(currency_code, currency_code)
    return f"{symbol} {value:,.2f}"


def _format_percent(value: Decimal) -> str:
    return f"{value:.1f}%"


def _transaction_rows(
    transactions: Sequence[Transaction],
    currency_code: str,
) -> list[dict[str, str | int | None]]:
    """Prepare transactions for the ledger table."""
    rows = []
    for tx in transactions:
        recurrence = ""
        if tx.is_recurring:
            end_date = resolve_end_date(
                tx.effective_start_date,
                tx.effective_installments,
            )
            recurrence = (
                f"{tx.effective_installments}x until {end_date:%m/%Y}"
            )
        rows.append(
            {
                "ID": tx.id,
                "Date": tx.date.isoformat(),
                "Description": tx.description,
                "Category": tx.category,
                "Type": TYPE_LABELS.get(tx.type, tx.type),
                "Amount": _format_currency(tx.amount, currency_code),
                "Recurrence": recurrence,
            }
        )
    return rows


def _prepare_donut_chart_data(
    categories: Sequence[CategoryAmount],
    currency_code: str,
    max_categories: int = 6,
) -> list[dict[str, str | float]]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        categories: Expense totals sorted by amount, largest first.
        currency_code: Currency used for labels.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        list[dict[str, str | float]]: Altair-ready chart rows.
    """
    top_items = list(categories[:max_categories])
    other_amount = sum(
        (item.amount for item in categories[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_items.append(CategoryAmount(category="Other", amount=other_amount))
    total_amount = sum(
        (item.amount for item in categories),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for item in top_items:
        share = (
            (item.amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": item.category,
                "amount": float(item.amount),
                "amount_label": _format_currency(item.amount, currency_code),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _projection_chart_data(
    points: Sequence[ProjectionPoint],
) -> list[dict[str, str | float]]:
    return [
        {
            "period": point.period_start.strftime("%b %Y"),
            "order": point.period_index,
            "balance": float(point.projected_balance),
        }
        for point in points
    ]


def _report_table_rows(
    rows: Sequence[PeriodReportRow],
    currency_code: str,
) -> list[dict[str, str]]:
    return [
        {
            "Period": row.label,
            "Income": _format_currency(row.income, currency_code),
            "Expenses": _format_currency(row.expenses, currency_code),
            "Net": _format_currency(row.net, currency_code),
            "Result": row.classification,
        }
        for row in rows
    ]


def _investment_rows(
    investments: Sequence[Investment],
    currency_code: str,
) -> list[dict[str, str | int | None]]:
    """Prepare investments for the portfolio table."""
    return [
        {
            "ID": investment.id,
            "Name": investment.name,
            "Type": investment.type,
            "Amount": _format_currency(investment.amount, currency_code),
            "Expected return": _format_percent(investment.expected_return),
            "Date": investment.date.isoformat(),
        }
        for investment in investments
    ]


def _budget_caption(status: BudgetStatus, currency_code: str) -> str:
    spent = _format_currency(status.spent, currency_code)
    limit = _format_currency(status.limit_amount, currency_code)
    remaining = _format_currency(status.remaining, currency_code)
    return (
        f"{status.category}: {spent} / {limit} "
        f"({_format_percent(status.percent)}, remaining {remaining})"
    )


def _render_budget_status(status: BudgetStatus, currency_code: str) -> None:
    """Show a budget line colored by its alert level, then its progress bar."""
    caption = _budget_caption(status, currency_code)
    if status.alert_level == ALERT_CRITICAL:
        st.error(caption)
    elif status.alert_level == ALERT_WARNING:
        st.warning(caption)
    else:
        st.caption(caption)
    st.progress(float(clamp_percentage(status.percent)) / 100)


def _import_uploaded(repository: LedgerRepositoryPort, uploaded) -> None:
    """Import an uploaded CSV file and refresh the page on success."""
    try:
        text = uploaded.getvalue().decode("utf-8")
    except UnicodeDecodeError:
        st.error("The file is not valid UTF-8 text; nothing was imported.")
        return
    try:
        result = ImportTransactionsUseCase(repository).execute(text)
    except LedgerStorageError as exc:
        st.error(f"Storage is unavailable; import stopped. ({exc})")
        return
    message = f"Imported {result.imported_count} transactions."
    get_usage_logger().info(message)
    st.success(message)
    st.rerun()


def _run_write(action, success_message: str) -> None:
    """Run a write use case and report the outcome to the user."""
    try:
        action()
    except ValidationError as exc:
        st.error(f"Invalid {exc.field}: {exc.message}")
        return
    except LedgerStorageError as exc:
        st.error(f"Storage is unavailable, nothing was saved. ({exc})")
        return
    get_usage_logger().info(success_message)
    st.success(success_message)
    st.rerun()


def _render_chart(chart, fallback_data) -> None:
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        st.dataframe(fallback_data, hide_index=True)
        return
    st.altair_chart(chart, width="stretch")


def _render_dashboard(
    repository: LedgerRepositoryPort,
    snapshot: LedgerSnapshot,
    currency_code: str,
) -> None:
    summary = GetSummaryUseCase(repository).execute(snapshot=snapshot)
    balance_col, income_col, expense_col, invested_col = st.columns(4)
    balance_col.metric(
        "Available balance",
        _format_currency(summary.available_balance, currency_code),
    )
    income_col.metric(
        "Income",
        _format_currency(summary.total_income, currency_code),
        f"variable {_format_currency(summary.variable_income, currency_code)}",
        delta_color="off",
    )
    expense_col.metric(
        "Expenses",
        _format_currency(summary.total_expense, currency_code),
        f"variable {_format_currency(summary.variable_expense, currency_code)}",
        delta_color="off",
    )
    invested_col.metric(
        "Invested",
        _format_currency(summary.total_invested, currency_code),
    )

    categories = GetCategoryBreakdownUseCase(repository).execute(
        snapshot=snapshot
    )
    st.subheader("Spending by category")
    if not categories:
        st.info("No expenses recorded yet.")
    else:
        data = _prepare_donut_chart_data(categories, currency_code)
        chart = alt.Chart(alt.Data(values=data)).mark_arc(
            innerRadius=90,
            cornerRadius=6,
            padAngle=0.02,
        ).encode(
            theta=alt.Theta("amount:Q"),
            color=alt.Color(
                "category:N",
                legend=alt.Legend(orient="bottom", title=None, columns=3),
            ),
            order=alt.Order("amount:Q", sort="descending"),
            tooltip=[
                alt.Tooltip("category:N"),
                alt.Tooltip("amount_label:N"),
                alt.Tooltip("share_label:N"),
            ],
        ).properties(width=360, height=360)
        _render_chart(chart, data)

    statuses = GetBudgetStatusesUseCase(repository).execute(snapshot=snapshot)
    critical = [s for s in statuses if s.alert_level == ALERT_CRITICAL]
    for status in critical:
        st.warning(
            f"Budget almost exhausted: {_budget_caption(status, currency_code)}"
        )


def _render_transactions(
    repository: LedgerRepositoryPort,
    snapshot: LedgerSnapshot,
    currency_code: str,
) -> None:
    st.subheader("New transaction")
    with st.form("transaction_form", clear_on_submit=True):
        description = st.text_input("Description")
        amount = st.text_input("Amount", placeholder="0,00")
        transaction_type = st.selectbox(
            "Type",
            options=list(TRANSACTION_TYPES),
            format_func=lambda value: TYPE_LABELS[value],
        )
        category = st.text_input("Category")
        booking_date = st.date_input("Date", value=date.today())
        is_recurring = st.checkbox("Recurring")
        installments = st.number_input(
            "Installments",
            min_value=1,
            value=12,
            step=1,
        )
        start_date = st.date_input("First installment", value=booking_date)
        submitted = st.form_submit_button("Save")
    if submitted:
        payload = {
            "description": description,
            "amount": amount,
            "type": transaction_type,
            "category": category,
            "date": booking_date,
            "is_recurring": is_recurring,
            "installments": installments,
            "start_date": start_date,
        }
        _run_write(
            lambda: AddTransactionUseCase(repository).execute(payload),
            "Transaction saved.",
        )

    st.subheader("Import CSV")
    uploaded = st.file_uploader(
        "description, amount, type, category, date",
        type=["csv"],
    )
    if uploaded is not None and st.button("Import file"):
        _import_uploaded(repository, uploaded)

    st.subheader("Ledger")
    transactions = snapshot.transactions
    st.caption(f"{len(transactions)} transactions")
    st.dataframe(
        _transaction_rows(transactions, currency_code),
        width="stretch",
        hide_index=True,
        height=420,
    )
    if transactions:
        selected = st.selectbox(
            "Delete transaction",
            options=[tx.id for tx in transactions],
            format_func=lambda tx_id: next(
                f"{tx.date} · {tx.description}"
                for tx in transactions
                if tx.id == tx_id
            ),
        )
        if st.button("Delete"):
            _run_write(
                lambda: DeleteEntryUseCase(repository).execute(
                    "transaction",
                    selected,
                ),
                "Transaction deleted.",
            )


def _render_projections(
    repository: LedgerRepositoryPort,
    snapshot: LedgerSnapshot,
    settings: FinanceSettings,
) -> None:
    periods = st.slider(
        "Months ahead",
        min_value=1,
        max_value=36,
        value=max(settings.projection_periods, 1),
    )
    only_active = st.checkbox("Ignore recurring series that have ended")
    points = GetProjectionUseCase(repository).execute(
        periods_ahead=periods,
        only_active=only_active,
        snapshot=snapshot,
    )
    data = _projection_chart_data(points)
    chart = alt.Chart(alt.Data(values=data)).mark_area(
        line=True,
        opacity=0.3,
    ).encode(
        x=alt.X("period:N", sort=alt.SortField("order"), title=None),
        y=alt.Y("balance:Q", title="Projected balance"),
        tooltip=[alt.Tooltip("period:N"), alt.Tooltip("balance:Q", format=",.2f")],
    )
    st.subheader("Balance projection")
    _render_chart(chart, data)
    if points:
        st.metric(
            f"Balance in {periods} months",
            _format_currency(
                points[-1].projected_balance,
                settings.currency_code,
            ),
        )


def _render_taxes(
    repository: LedgerRepositoryPort,
    snapshot: LedgerSnapshot,
    settings: FinanceSettings,
) -> None:
    currency_code = settings.currency_code
    try:
        tax_table = build_tax_table(settings)
    except RuntimeError as exc:
        st.error(str(exc))
        return
    breakdown = ComputeTaxesUseCase(repository, tax_table).execute(
        snapshot=snapshot
    )
    st.caption(f"Brackets for fiscal year {tax_table.fiscal_year}")
    gross_col, deductions_col, net_col = st.columns(3)
    gross_col.metric(
        "Gross income",
        _format_currency(breakdown.gross_income, currency_code),
    )
    deductions_col.metric(
        "Contribution + income tax",
        _format_currency(breakdown.total_deductions, currency_code),
    )
    net_col.metric("Net income", _format_currency(breakdown.net, currency_code))
    st.dataframe(
        [
            {
                "Item": "Social contribution",
                "Amount": _format_currency(
                    breakdown.contribution,
                    currency_code,
                ),
            },
            {
                "Item": "Income tax",
                "Amount": _format_currency(breakdown.income_tax, currency_code),
            },
        ],
        hide_index=True,
    )


def _render_reports(
    repository: LedgerRepositoryPort,
    snapshot: LedgerSnapshot,
    currency_code: str,
) -> None:
    granularity = st.selectbox("Granularity", options=list(REPORT_GRANULARITIES))
    year = int(
        st.number_input(
            "Year",
            min_value=1900,
            max_value=2100,
            value=date.today().year,
            step=1,
        )
    )
    rows = BuildPeriodReportUseCase(repository).execute(
        granularity=granularity,
        reference_year=year,
        snapshot=snapshot,
    )
    st.dataframe(_report_table_rows(rows, currency_code), hide_index=True)
    export = ExportPeriodReportUseCase(repository).execute(
        granularity=granularity,
        reference_year=year,
        snapshot=snapshot,
    )
    st.download_button(
        "Export CSV",
        data=export.content,
        file_name=export.filename,
        mime="text/csv",
    )


def _render_budgets_and_goals(
    repository: LedgerRepositoryPort,
    snapshot: LedgerSnapshot,
    currency_code: str,
) -> None:
    budgets_col, goals_col = st.columns(2)
    with budgets_col:
        st.subheader("Budgets")
        with st.form("budget_form", clear_on_submit=True):
            category = st.text_input("Category")
            limit_amount = st.text_input("Monthly limit")
            submitted = st.form_submit_button("Save budget")
        if submitted:
            payload = {"category": category, "limit_amount": limit_amount}
            _run_write(
                lambda: SetBudgetUseCase(repository).execute(payload),
                "Budget saved.",
            )
        statuses = GetBudgetStatusesUseCase(repository).execute(
            snapshot=snapshot
        )
        for budget, status in zip(snapshot.budgets, statuses):
            _render_budget_status(status, currency_code)
            if st.button("Remove", key=f"budget-{budget.id}"):
                _run_write(
                    lambda budget_id=budget.id: DeleteEntryUseCase(
                        repository
                    ).execute("budget", budget_id),
                    "Budget removed.",
                )

    with goals_col:
        st.subheader("Goals")
        with st.form("goal_form", clear_on_submit=True):
            name = st.text_input("Name")
            target_amount = st.text_input("Target amount")
            current_amount = st.text_input("Current amount", value="0")
            deadline = st.date_input("Deadline", value=date.today())
            goal_category = st.text_input("Category", key="goal_category")
            goal_submitted = st.form_submit_button("Save goal")
        if goal_submitted:
            payload = {
                "name": name,
                "target_amount": target_amount,
                "current_amount": current_amount,
                "deadline": deadline,
                "category": goal_category,
            }
            _run_write(
                lambda: AddGoalUseCase(repository).execute(payload),
                "Goal saved.",
            )
        goal_statuses = GetGoalStatusesUseCase(repository).execute(
            snapshot=snapshot
        )
        for goal, status in zip(snapshot.goals, goal_statuses):
            st.caption(
                f"{status.name}: "
                f"{_format_currency(status.current_amount, currency_code)} / "
                f"{_format_currency(status.target_amount, currency_code)} "
                f"({_format_percent(status.percent)}) by {status.deadline}"
            )
            st.progress(float(status.display_percent) / 100)
            if st.button("Remove", key=f"goal-{goal.id}"):
                _run_write(
                    lambda goal_id=goal.id: DeleteEntryUseCase(
                        repository
                    ).execute("goal", goal_id),
                    "Goal removed.",
                )

    st.subheader("Investments")
    if snapshot.investments:
        st.dataframe(
            _investment_rows(snapshot.investments, currency_code),
            hide_index=True,
        )
    else:
        st.info("No investments recorded yet.")

    st.subheader("New investment")
    with st.form("investment_form", clear_on_submit=True):
        investment_name = st.text_input("Name", key="investment_name")
        investment_amount = st.text_input("Amount", key="investment_amount")
        investment_type = st.text_input("Type", key="investment_type")
        expected_return = st.text_input("Expected return (%)", value="0")
        investment_date = st.date_input("Date", value=date.today())
        investment_submitted = st.form_submit_button("Save investment")
    if investment_submitted:
        payload = {
            "name": investment_name,
            "amount": investment_amount,
            "type": investment_type,
            "expected_return": expected_return,
            "date": investment_date,
        }
        _run_write(
            lambda: AddInvestmentUseCase(repository).execute(payload),
            "Investment saved.",
        )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Personal Finance", layout="wide")
    st.title("Personal Finance")

    page = st.sidebar.selectbox("Page", PAGES)
    settings = FinanceSettings.from_env()
    try:
        repository = _build_repository()
        snapshot = _fetch_snapshot(repository)
    except LedgerStorageError as exc:
        st.error(f"Could not read the ledger: {exc}")
        return

    currency_code = settings.currency_code
    if page == "Dashboard":
        _render_dashboard(repository, snapshot, currency_code)
    elif page == "Transactions":
        _render_transactions(repository, snapshot, currency_code)
    elif page == "Projections":
        _render_projections(repository, snapshot, settings)
    elif page == "Taxes":
        _render_taxes(repository, snapshot, settings)
    elif page == "Reports":
        _render_reports(repository, snapshot, currency_code)
    else:
        _render_budgets_and_goals(repository, snapshot, currency_code)


if __name__ == "__main__":  # pragma: no cover
    main()
