"""Domain services folding a ledger into totals."""

from collections.abc import Callable, Iterable
from decimal import Decimal

from src.domain.constants import (
    FIXED_EXPENSE,
    FIXED_INCOME,
    INCOME_TYPES,
    VARIABLE_EXPENSE,
    VARIABLE_INCOME,
)
from src.domain.models import (
    CategoryAmount,
    Investment,
    LedgerSummary,
    Transaction,
)
from src.utils.decimal_utils import coerce_decimal


def sum_by_predicate(
    transactions: Iterable[Transaction],
    predicate: Callable[[Transaction], bool],
) -> Decimal:
    """Sum transaction amounts matching a predicate.

    Args:
        transactions: Ledger transactions.
        predicate: Filter applied to each transaction.

    Returns:
        Decimal: Total of the matching amounts, zero when nothing matches.
    """
    total = Decimal("0")
    for transaction in transactions:
        if predicate(transaction):
            total += coerce_decimal(transaction.amount)
    return total


def sum_by_type(
    transactions: Iterable[Transaction],
    *types: str,
) -> Decimal:
    """Sum transaction amounts whose type is one of ``types``."""
    return sum_by_predicate(transactions, lambda tx: tx.type in types)


def group_by_category(
    transactions: Iterable[Transaction],
    exclude_types: Iterable[str] = (),
) -> dict[str, Decimal]:
    """Sum amounts per category, skipping the excluded types.

    Args:
        transactions: Ledger transactions.
        exclude_types: Transaction types left out of the totals.

    Returns:
        dict[str, Decimal]: Category totals in first-seen order.
    """
    excluded = set(exclude_types)
    totals: dict[str, Decimal] = {}
    for transaction in transactions:
        if transaction.type in excluded:
            continue
        totals[transaction.category] = (
            totals.get(transaction.category, Decimal("0"))
            + coerce_decimal(transaction.amount)
        )
    return totals


def compute_category_breakdown(
    transactions: Iterable[Transaction],
) -> list[CategoryAmount]:
    """Return expense totals per category, largest first."""
    totals = group_by_category(transactions, exclude_types=INCOME_TYPES)
    return [
        CategoryAmount(category=category, amount=amount)
        for category, amount in sorted(
            totals.items(),
            key=lambda item: (-item[1], item[0]),
        )
    ]


def compute_summary(
    transactions: Iterable[Transaction],
    investments: Iterable[Investment],
) -> LedgerSummary:
    """Compute per-type totals and the invested total.

    Args:
        transactions: Ledger transactions.
        investments: Ledger investments.

    Returns:
        LedgerSummary: Totals for the four transaction types and investments.
    """
    rows = list(transactions)
    total_invested = Decimal("0")
    for investment in investments:
        total_invested += coerce_decimal(investment.amount)
    return LedgerSummary(
        fixed_income=sum_by_type(rows, FIXED_INCOME),
        variable_income=sum_by_type(rows, VARIABLE_INCOME),
        fixed_expense=sum_by_type(rows, FIXED_EXPENSE),
        variable_expense=sum_by_type(rows, VARIABLE_EXPENSE),
        total_invested=total_invested,
    )


__all__ = [
    "sum_by_predicate",
    "sum_by_type",
    "group_by_category",
    "compute_category_breakdown",
    "compute_summary",
]
