"""Domain package for business rules and core models."""

from .constants import EXPENSE_TYPES, INCOME_TYPES, TRANSACTION_TYPES
from .errors import LedgerStorageError, ValidationError
from .models import (
    Budget,
    BudgetStatus,
    CategoryAmount,
    Goal,
    GoalStatus,
    Investment,
    LedgerSnapshot,
    LedgerSummary,
    PeriodReportRow,
    ProjectionPoint,
    TaxBreakdown,
    TaxTable,
    Transaction,
)

__all__ = [
    "TRANSACTION_TYPES",
    "INCOME_TYPES",
    "EXPENSE_TYPES",
    "ValidationError",
    "LedgerStorageError",
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
    "TaxTable",
    "TaxBreakdown",
]
