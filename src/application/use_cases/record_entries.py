"""Use cases creating and deleting ledger records.

Every write validates its payload first. A ``ValidationError`` means nothing
was written; storage failures surface as ``LedgerStorageError``.
"""

from collections.abc import Mapping
from typing import Any

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.services.validation import (
    validate_budget,
    validate_goal,
    validate_investment,
    validate_transaction,
)
from src.infrastructure.logging.logger import get_app_logger


class AddTransactionUseCase:
    """Validate and store a transaction."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, payload: Mapping[str, Any]) -> int:
        """Store the transaction and return its identifier."""
        transaction = validate_transaction(payload)
        transaction_id = self._ledger_repository.add_transaction(transaction)
        self._logger.info(
            f"Stored transaction id={transaction_id} type={transaction.type} "
            f"amount={transaction.amount}"
        )
        return transaction_id


class AddInvestmentUseCase:
    """Validate and store an investment."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, payload: Mapping[str, Any]) -> int:
        investment = validate_investment(payload)
        investment_id = self._ledger_repository.add_investment(investment)
        self._logger.info(f"Stored investment id={investment_id}")
        return investment_id


class AddGoalUseCase:
    """Validate and store a goal."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, payload: Mapping[str, Any]) -> int:
        goal = validate_goal(payload)
        goal_id = self._ledger_repository.add_goal(goal)
        self._logger.info(f"Stored goal id={goal_id}")
        return goal_id


class SetBudgetUseCase:
    """Validate a budget and upsert it by category."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, payload: Mapping[str, Any]) -> int:
        """Store the budget, replacing the limit of an existing category."""
        budget = validate_budget(payload)
        budget_id = self._ledger_repository.upsert_budget(budget)
        self._logger.info(
            f"Budget for category={budget.category} set to "
            f"{budget.limit_amount}"
        )
        return budget_id


class DeleteEntryUseCase:
    """Delete a transaction, goal or budget by identifier."""

    KINDS = ("transaction", "goal", "budget")

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, kind: str, entry_id: int) -> bool:
        """Delete the entry.

        Args:
            kind: transaction, goal or budget.
            entry_id: Identifier assigned by storage.

        Returns:
            bool: False when no such entry existed.

        Raises:
            ValueError: If ``kind`` is not supported.
        """
        if kind == "transaction":
            deleted = self._ledger_repository.delete_transaction(entry_id)
        elif kind == "goal":
            deleted = self._ledger_repository.delete_goal(entry_id)
        elif kind == "budget":
            deleted = self._ledger_repository.delete_budget(entry_id)
        else:
            raise ValueError(
                f"Unsupported entry kind: {kind}. "
                f"Expected one of {', '.join(self.KINDS)}."
            )
        if not deleted:
            self._logger.info(f"No {kind} with id={entry_id} to delete")
        return deleted


__all__ = [
    "AddTransactionUseCase",
    "AddInvestmentUseCase",
    "AddGoalUseCase",
    "SetBudgetUseCase",
    "DeleteEntryUseCase",
]
