"""Calendar bucketing of the ledger for period reports."""

import calendar
from collections.abc import Callable, Iterable
from decimal import Decimal

from src.domain.constants import (
    GRANULARITY_ANNUAL,
    GRANULARITY_MONTHLY,
    GRANULARITY_QUARTERLY,
    GRANULARITY_SEMI_ANNUAL,
)
from src.domain.models import PeriodReportRow, Transaction
from src.utils.decimal_utils import coerce_decimal


def _month_bucket(month: int) -> int:
    return month - 1


def _quarter_bucket(month: int) -> int:
    return (month - 1) // 3


def _semester_bucket(month: int) -> int:
    return 0 if month <= 6 else 1


def _annual_bucket(month: int) -> int:
    return 0


def _bucket_layout(
    granularity: str,
    reference_year: int,
) -> tuple[list[str], Callable[[int], int]]:
    if granularity == GRANULARITY_MONTHLY:
        return list(calendar.month_name[1:]), _month_bucket
    if granularity == GRANULARITY_QUARTERLY:
        return [f"Q{index}" for index in range(1, 5)], _quarter_bucket
    if granularity == GRANULARITY_SEMI_ANNUAL:
        return ["H1", "H2"], _semester_bucket
    if granularity == GRANULARITY_ANNUAL:
        return [str(reference_year)], _annual_bucket
    raise ValueError(f"Unsupported report granularity: {granularity}")


def build_report(
    transactions: Iterable[Transaction],
    granularity: str,
    reference_year: int,
) -> list[PeriodReportRow]:
    """Bucket the ledger by calendar period for one year.

    Each transaction is counted once, in the bucket of its own booking date.
    Recurring series are not expanded. Buckets without entries report zero.

    Args:
        transactions: Ledger transactions.
        granularity: monthly, quarterly, semi-annual or annual.
        reference_year: Calendar year to report on.

    Returns:
        list[PeriodReportRow]: Rows in calendar order.

    Raises:
        ValueError: If the granularity is unknown.
    """
    labels, bucket_of = _bucket_layout(granularity, reference_year)
    income = [Decimal("0") for _ in labels]
    expenses = [Decimal("0") for _ in labels]
    for transaction in transactions:
        if transaction.date.year != reference_year:
            continue
        bucket = bucket_of(transaction.date.month)
        amount = coerce_decimal(transaction.amount)
        if transaction.is_income:
            income[bucket] += amount
        elif transaction.is_expense:
            expenses[bucket] += amount
    return [
        PeriodReportRow(label=label, income=income[index], expenses=expenses[index])
        for index, label in enumerate(labels)
    ]


__all__ = ["build_report"]
