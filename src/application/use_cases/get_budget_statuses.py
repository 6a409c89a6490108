"""Use cases to evaluate budgets and goals."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.load_ledger import resolve_snapshot
from src.domain.models import BudgetStatus, GoalStatus, LedgerSnapshot
from src.domain.services.evaluation import evaluate_budget, evaluate_goal
from src.infrastructure.logging.logger import get_app_logger


class GetBudgetStatusesUseCase:
    """Compute consumption of every budget against the whole ledger."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        snapshot: LedgerSnapshot | None = None,
    ) -> list[BudgetStatus]:
        """Return one status per budget, in storage order."""
        ledger = resolve_snapshot(self._ledger_repository, snapshot)
        statuses = [
            evaluate_budget(budget, ledger.transactions)
            for budget in ledger.budgets
        ]
        over_limit = [status for status in statuses if status.remaining < 0]
        if over_limit:
            self._logger.warning(
                f"{len(over_limit)} budgets are over their limit: "
                f"{', '.join(status.category for status in over_limit)}"
            )
        return statuses


class GetGoalStatusesUseCase:
    """Compute progress of every goal."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        snapshot: LedgerSnapshot | None = None,
    ) -> list[GoalStatus]:
        """Return one status per goal, in storage order."""
        ledger = resolve_snapshot(self._ledger_repository, snapshot)
        statuses = [evaluate_goal(goal) for goal in ledger.goals]
        self._logger.info(f"Evaluated {len(statuses)} goals")
        return statuses


__all__ = [
    "GetBudgetStatusesUseCase",
    "GetGoalStatusesUseCase",
    "BudgetStatus",
    "GoalStatus",
]
