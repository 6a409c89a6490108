"""Linear cash-flow projection from recurring transactions."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.constants import PERIOD_UNIT_MONTHS
from src.domain.models import ProjectionPoint, Transaction
from src.domain.services.aggregation import sum_by_predicate
from src.domain.services.recurrence import add_months, is_active_on
from src.utils.decimal_utils import coerce_decimal


def recurring_flow(
    transactions: Iterable[Transaction],
    on_day: date | None = None,
) -> tuple[Decimal, Decimal]:
    """Return (recurring income, recurring expense) totals.

    Args:
        transactions: Ledger transactions.
        on_day: When set, only series active on that day are counted.

    Returns:
        tuple[Decimal, Decimal]: Monthly recurring income and expense.
    """
    rows = [
        tx
        for tx in transactions
        if tx.is_recurring and (on_day is None or is_active_on(tx, on_day))
    ]
    income = sum_by_predicate(rows, lambda tx: tx.is_income)
    expense = sum_by_predicate(rows, lambda tx: tx.is_expense)
    return income, expense


def project(
    transactions: Iterable[Transaction],
    periods_ahead: int,
    *,
    current_balance: Decimal,
    reference_date: date,
    period_unit: str = "month",
    only_active: bool = False,
) -> list[ProjectionPoint]:
    """Extrapolate the balance over future periods.

    The balance of period ``i`` is
    ``current_balance + net_flow * months_per_unit * (i + 1)``; period 0 is
    one unit after ``reference_date``.

    Args:
        transactions: Ledger transactions.
        periods_ahead: Number of future periods to return.
        current_balance: Available balance today.
        reference_date: Date the projection starts from.
        period_unit: One of month, quarter, semester, year.
        only_active: Only count recurring series still active at the start
            of each projected period. Off by default, every recurring entry
            is counted for every period.

    Returns:
        list[ProjectionPoint]: One point per future period.

    Raises:
        ValueError: On a negative horizon or an unknown period unit.
    """
    if periods_ahead < 0:
        raise ValueError(f"periods_ahead must be >= 0, got {periods_ahead}")
    if period_unit not in PERIOD_UNIT_MONTHS:
        raise ValueError(f"Unsupported period unit: {period_unit}")
    months_per_unit = PERIOD_UNIT_MONTHS[period_unit]
    rows = list(transactions)
    balance = coerce_decimal(current_balance)
    anchor = reference_date.replace(day=1)

    income, expense = recurring_flow(rows)
    points: list[ProjectionPoint] = []
    accumulated = Decimal("0")
    for index in range(periods_ahead):
        period_start = add_months(anchor, months_per_unit * (index + 1))
        if only_active:
            income, expense = recurring_flow(rows, on_day=period_start)
        accumulated += (income - expense) * months_per_unit
        points.append(
            ProjectionPoint(
                period_index=index,
                period_start=period_start,
                projected_balance=balance + accumulated,
            )
        )
    return points


__all__ = ["recurring_flow", "project"]
