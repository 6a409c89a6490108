"""Domain models package."""

from .finance import (
    BudgetStatus,
    CategoryAmount,
    GoalStatus,
    LedgerSummary,
    PeriodReportRow,
    ProjectionPoint,
)
from .ledger import Budget, Goal, Investment, LedgerSnapshot, Transaction
from .tax import (
    ContributionBracket,
    IncomeTaxBracket,
    TaxBreakdown,
    TaxTable,
)

__all__ = [
    "Transaction",
    "Investment",
    "Goal",
    "Budget",
    "LedgerSnapshot",
    "LedgerSummary",
    "CategoryAmount",
    "ProjectionPoint",
    "PeriodReportRow",
    "BudgetStatus",
    "GoalStatus",
    "ContributionBracket",
    "IncomeTaxBracket",
    "TaxTable",
    "TaxBreakdown",
]
