"""Domain models for ledger records."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    BUDGET_PERIOD_MONTHLY,
    EXPENSE_TYPES,
    INCOME_TYPES,
)


@dataclass(frozen=True)
class Transaction:
    """A single income or expense entry.

    Attributes:
        description: Free text label, never empty.
        amount: Non-negative amount.
        type: One of the four transaction types.
        category: Free text category.
        date: Booking date of the entry.
        is_recurring: Whether the entry is one installment of a series.
        installments: Number of monthly installments of the series.
        start_date: First installment date; defaults to ``date``.
        id: Identifier assigned by storage.
    """

    description: str
    amount: Decimal
    type: str
    category: str
    date: date
    is_recurring: bool = False
    installments: int = 1
    start_date: date | None = None
    id: int | None = None

    @property
    def effective_start_date(self) -> date:
        """Return the start date, falling back to the booking date."""
        if not self.is_recurring:
            return self.date
        return self.start_date or self.date

    @property
    def effective_installments(self) -> int:
        """Return the installment count, forced to 1 when not recurring."""
        return self.installments if self.is_recurring else 1

    @property
    def is_income(self) -> bool:
        return self.type in INCOME_TYPES

    @property
    def is_expense(self) -> bool:
        return self.type in EXPENSE_TYPES


@dataclass(frozen=True)
class Investment:
    """An amount allocated to an investment vehicle."""

    name: str
    amount: Decimal
    type: str
    expected_return: Decimal
    date: date
    id: int | None = None


@dataclass(frozen=True)
class Goal:
    """A savings goal with a target amount and deadline."""

    name: str
    target_amount: Decimal
    current_amount: Decimal
    deadline: date
    category: str
    id: int | None = None


@dataclass(frozen=True)
class Budget:
    """A spending limit for one category."""

    category: str
    limit_amount: Decimal
    period: str = BUDGET_PERIOD_MONTHLY
    id: int | None = None


@dataclass(frozen=True)
class LedgerSnapshot:
    """Read-only view of every ledger collection at one point in time."""

    transactions: tuple[Transaction, ...] = field(default_factory=tuple)
    investments: tuple[Investment, ...] = field(default_factory=tuple)
    goals: tuple[Goal, ...] = field(default_factory=tuple)
    budgets: tuple[Budget, ...] = field(default_factory=tuple)


__all__ = ["Transaction", "Investment", "Goal", "Budget", "LedgerSnapshot"]
