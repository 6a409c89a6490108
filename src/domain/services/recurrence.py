"""Calendar arithmetic for recurring transactions."""

import calendar
from datetime import date

from src.domain.models.ledger import Transaction


def add_months(day: date, months: int) -> date:
    """Shift a date by whole calendar months.

    The day of month is kept when possible and clamped to the last day of
    the resulting month otherwise (Jan 31 + 1 month -> Feb 28/29).

    Args:
        day: Date to shift.
        months: Number of months to add; may be negative.

    Returns:
        date: Shifted date.
    """
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def resolve_end_date(start_date: date, installments: int) -> date:
    """Return the date of the last installment of a series.

    Args:
        start_date: Date of the first installment.
        installments: Number of monthly installments, at least 1.

    Returns:
        date: ``start_date`` shifted by ``installments - 1`` months.

    Raises:
        ValueError: If ``installments`` is lower than 1.
    """
    if installments < 1:
        raise ValueError(f"installments must be >= 1, got {installments}")
    return add_months(start_date, installments - 1)


def active_span(transaction: Transaction) -> tuple[date, date]:
    """Return the inclusive (start, end) span of a transaction."""
    if not transaction.is_recurring:
        return transaction.date, transaction.date
    start = transaction.effective_start_date
    return start, resolve_end_date(start, transaction.effective_installments)


def is_active_on(transaction: Transaction, day: date) -> bool:
    """Return True when ``day`` falls inside the transaction's active span."""
    start, end = active_span(transaction)
    return start <= day <= end


__all__ = ["add_months", "resolve_end_date", "active_span", "is_active_on"]
