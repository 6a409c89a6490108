"""Port for reading and writing ledger records."""

from typing import Protocol

from src.domain.models import (
    Budget,
    Goal,
    Investment,
    LedgerSnapshot,
    Transaction,
)


class LedgerRepositoryPort(Protocol):
    """Port exposing create, read and delete access to the ledger."""

    def prepare_schema(self) -> None:
        """Ensure the ledger storage is ready to receive data."""

    def fetch_transactions(self) -> list[Transaction]:
        """Return every transaction, most recent first."""

    def fetch_investments(self) -> list[Investment]:
        """Return every investment, most recent first."""

    def fetch_goals(self) -> list[Goal]:
        """Return every goal."""

    def fetch_budgets(self) -> list[Budget]:
        """Return every budget."""

    def fetch_snapshot(self) -> LedgerSnapshot:
        """Return all four collections read together."""

    def add_transaction(self, transaction: Transaction) -> int:
        """Store a transaction and return its identifier."""

    def add_investment(self, investment: Investment) -> int:
        """Store an investment and return its identifier."""

    def add_goal(self, goal: Goal) -> int:
        """Store a goal and return its identifier."""

    def upsert_budget(self, budget: Budget) -> int:
        """Store a budget, replacing any budget of the same category."""

    def delete_transaction(self, transaction_id: int) -> bool:
        """Delete a transaction; return False when it did not exist."""

    def delete_goal(self, goal_id: int) -> bool:
        """Delete a goal; return False when it did not exist."""

    def delete_budget(self, budget_id: int) -> bool:
        """Delete a budget; return False when it did not exist."""


__all__ = ["LedgerRepositoryPort"]
