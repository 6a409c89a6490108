"""Domain services package."""

from .aggregation import (
    compute_category_breakdown,
    compute_summary,
    group_by_category,
    sum_by_predicate,
    sum_by_type,
)
from .evaluation import (
    budget_consumption,
    category_spend,
    clamp_percentage,
    evaluate_budget,
    evaluate_goal,
    goal_progress,
)
from .normalization import normalize_text, normalize_transaction_type
from .projection import project, recurring_flow
from .recurrence import active_span, add_months, is_active_on, resolve_end_date
from .reporting import build_report
from .taxes import compute_taxes, contribution_for, income_tax_for
from .validation import (
    validate_budget,
    validate_goal,
    validate_investment,
    validate_transaction,
)

__all__ = [
    "sum_by_predicate",
    "sum_by_type",
    "group_by_category",
    "compute_category_breakdown",
    "compute_summary",
    "category_spend",
    "budget_consumption",
    "goal_progress",
    "clamp_percentage",
    "evaluate_budget",
    "evaluate_goal",
    "normalize_text",
    "normalize_transaction_type",
    "project",
    "recurring_flow",
    "add_months",
    "resolve_end_date",
    "active_span",
    "is_active_on",
    "build_report",
    "compute_taxes",
    "contribution_for",
    "income_tax_for",
    "validate_transaction",
    "validate_investment",
    "validate_goal",
    "validate_budget",
]
