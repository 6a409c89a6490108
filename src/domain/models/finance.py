"""Domain models for financial aggregates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class LedgerSummary:
    """Totals per transaction type plus the invested total.

    Attributes:
        fixed_income: Sum of fixed income entries.
        variable_income: Sum of variable income entries.
        fixed_expense: Sum of fixed expense entries.
        variable_expense: Sum of variable expense entries.
        total_invested: Sum of investment allocations.
    """

    fixed_income: Decimal
    variable_income: Decimal
    fixed_expense: Decimal
    variable_expense: Decimal
    total_invested: Decimal

    @property
    def total_income(self) -> Decimal:
        """Return fixed plus variable income."""
        return self.fixed_income + self.variable_income

    @property
    def total_expense(self) -> Decimal:
        """Return fixed plus variable expenses."""
        return self.fixed_expense + self.variable_expense

    @property
    def available_balance(self) -> Decimal:
        """Return income minus expenses; investments are not deducted."""
        return self.total_income - self.total_expense


@dataclass(frozen=True)
class CategoryAmount:
    """Amount aggregated for a given category."""

    category: str
    amount: Decimal


@dataclass(frozen=True)
class ProjectionPoint:
    """Projected balance for one future period."""

    period_index: int
    period_start: date
    projected_balance: Decimal


@dataclass(frozen=True)
class PeriodReportRow:
    """Income and expenses for one calendar bucket."""

    label: str
    income: Decimal
    expenses: Decimal

    @property
    def net(self) -> Decimal:
        """Return income minus expenses."""
        return self.income - self.expenses

    @property
    def classification(self) -> str:
        """Return surplus, deficit or even depending on the net sign."""
        if self.net > 0:
            return "surplus"
        if self.net < 0:
            return "deficit"
        return "even"


@dataclass(frozen=True)
class BudgetStatus:
    """Consumption of a budget against the ledger."""

    category: str
    limit_amount: Decimal
    spent: Decimal
    percent: Decimal
    alert_level: str

    @property
    def remaining(self) -> Decimal:
        """Return the limit minus the spend; negative when over budget."""
        return self.limit_amount - self.spent


@dataclass(frozen=True)
class GoalStatus:
    """Progress of a goal towards its target."""

    name: str
    target_amount: Decimal
    current_amount: Decimal
    deadline: date
    percent: Decimal
    display_percent: Decimal


__all__ = [
    "LedgerSummary",
    "CategoryAmount",
    "ProjectionPoint",
    "PeriodReportRow",
    "BudgetStatus",
    "GoalStatus",
]
