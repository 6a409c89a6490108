"""Application use cases package."""

from .build_period_report import (
    BuildPeriodReportUseCase,
    ExportPeriodReportUseCase,
    ReportExport,
)
from .compute_taxes import ComputeTaxesUseCase
from .get_budget_statuses import (
    GetBudgetStatusesUseCase,
    GetGoalStatusesUseCase,
)
from .get_category_breakdown import GetCategoryBreakdownUseCase
from .get_projection import GetProjectionUseCase
from .get_summary import GetSummaryUseCase
from .import_transactions import ImportResult, ImportTransactionsUseCase
from .load_ledger import LoadLedgerUseCase
from .record_entries import (
    AddGoalUseCase,
    AddInvestmentUseCase,
    AddTransactionUseCase,
    DeleteEntryUseCase,
    SetBudgetUseCase,
)

__all__ = [
    "LoadLedgerUseCase",
    "GetSummaryUseCase",
    "GetCategoryBreakdownUseCase",
    "GetProjectionUseCase",
    "ComputeTaxesUseCase",
    "BuildPeriodReportUseCase",
    "ExportPeriodReportUseCase",
    "ReportExport",
    "GetBudgetStatusesUseCase",
    "GetGoalStatusesUseCase",
    "AddTransactionUseCase",
    "AddInvestmentUseCase",
    "AddGoalUseCase",
    "SetBudgetUseCase",
    "DeleteEntryUseCase",
    "ImportTransactionsUseCase",
    "ImportResult",
]
