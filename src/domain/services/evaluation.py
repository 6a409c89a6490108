"""Budget consumption and goal progress."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import (
    Budget,
    BudgetStatus,
    Goal,
    GoalStatus,
    Transaction,
)
from src.domain.policies.budget_alerts import classify_budget_alert
from src.domain.services.aggregation import sum_by_predicate
from src.utils.decimal_utils import HUNDRED, coerce_decimal


def category_spend(
    category: str,
    transactions: Iterable[Transaction],
) -> Decimal:
    """Return expense totals for a category over the whole ledger."""
    return sum_by_predicate(
        transactions,
        lambda tx: tx.category == category and tx.is_expense,
    )


def budget_consumption(
    budget: Budget,
    transactions: Iterable[Transaction],
) -> Decimal:
    """Return spend as a percentage of the budget limit, unclamped.

    The spend is not scoped to the budget period.
    """
    spent = category_spend(budget.category, transactions)
    return spent / coerce_decimal(budget.limit_amount) * HUNDRED


def goal_progress(goal: Goal) -> Decimal:
    """Return current amount as a percentage of the target, unclamped."""
    return (
        coerce_decimal(goal.current_amount)
        / coerce_decimal(goal.target_amount)
        * HUNDRED
    )


def clamp_percentage(value: Decimal) -> Decimal:
    """Clamp a percentage to [0, 100] for progress bars."""
    return max(Decimal("0"), min(coerce_decimal(value), HUNDRED))


def evaluate_budget(
    budget: Budget,
    transactions: Iterable[Transaction],
) -> BudgetStatus:
    """Build the status of one budget against the ledger."""
    rows = list(transactions)
    spent = category_spend(budget.category, rows)
    percent = budget_consumption(budget, rows)
    return BudgetStatus(
        category=budget.category,
        limit_amount=coerce_decimal(budget.limit_amount),
        spent=spent,
        percent=percent,
        alert_level=classify_budget_alert(percent),
    )


def evaluate_goal(goal: Goal) -> GoalStatus:
    progress = goal_progress(goal)
    return GoalStatus(
        name=goal.name,
        target_amount=coerce_decimal(goal.target_amount),
        current_amount=coerce_decimal(goal.current_amount),
        deadline=goal.deadline,
        percent=progress,
        display_percent=clamp_percentage(progress),
    )


__all__ = [
    "category_spend",
    "budget_consumption",
    "goal_progress",
    "clamp_percentage",
    "evaluate_budget",
    "evaluate_goal",
]
