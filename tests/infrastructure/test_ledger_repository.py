"""Tests for the SQLAlchemy ledger repository against SQLite."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError

from src.domain.errors import LedgerStorageError
from src.domain.models import Budget, Goal, Investment, Transaction
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository


class _DbPort:
    def __init__(self, engine) -> None:
        self._engine = engine

    def get_ledger_engine(self):
        return self._engine


@pytest.fixture
def repository(tmp_path) -> SqlAlchemyLedgerRepository:
    engine = create_engine(f"sqlite:///{tmp_path / 'ledger.db'}", future=True)
    repo = SqlAlchemyLedgerRepository(_DbPort(engine))
    repo.prepare_schema()
    yield repo
    engine.dispose()


def _tx(description: str, booked: date, **overrides) -> Transaction:
    fields = {
        "description": description,
        "amount": Decimal("120.50"),
        "type": "variable_expense",
        "category": "Food",
        "date": booked,
    }
    fields.update(overrides)
    return Transaction(**fields)


def test_prepare_schema_is_idempotent(repository) -> None:
    repository.prepare_schema()

    assert repository.fetch_transactions() == []


def test_transactions_round_trip_most_recent_first(repository) -> None:
    first_id = repository.add_transaction(_tx("Older", date(2024, 1, 5)))
    second_id = repository.add_transaction(
        _tx(
            "Newer",
            date(2024, 3, 1),
            type="fixed_expense",
            is_recurring=True,
            installments=6,
        )
    )

    transactions = repository.fetch_transactions()

    assert second_id > first_id
    assert [tx.description for tx in transactions] == ["Newer", "Older"]
    newer = transactions[0]
    assert newer.id == second_id
    assert newer.amount == Decimal("120.50")
    assert newer.is_recurring is True
    assert newer.installments == 6
    assert newer.start_date == date(2024, 3, 1)
    assert transactions[1].installments == 1


def test_investments_and_goals_are_stored(repository) -> None:
    repository.add_investment(
        Investment(
            name="Bond",
            amount=Decimal("1000"),
            type="fixed",
            expected_return=Decimal("-1.5"),
            date=date(2024, 2, 2),
        )
    )
    goal_id = repository.add_goal(
        Goal(
            name="Car",
            target_amount=Decimal("30000"),
            current_amount=Decimal("0"),
            deadline=date(2026, 6, 30),
            category="Vehicle",
        )
    )

    snapshot = repository.fetch_snapshot()

    assert snapshot.investments[0].expected_return == Decimal("-1.5")
    assert snapshot.goals[0].id == goal_id
    assert snapshot.goals[0].deadline == date(2026, 6, 30)


def test_money_columns_keep_every_digit(repository) -> None:
    repository.add_transaction(
        _tx("Large", date(2024, 5, 1), amount=Decimal("99999999999999999.99"))
    )
    repository.add_transaction(
        _tx("Small", date(2024, 5, 2), amount=Decimal("0.10"))
    )
    repository.upsert_budget(
        Budget(category="Food", limit_amount=Decimal("12345678901234567.01"))
    )

    amounts = [str(tx.amount) for tx in repository.fetch_transactions()]
    budget = repository.fetch_budgets()[0]

    assert amounts == ["0.10", "99999999999999999.99"]
    assert str(budget.limit_amount) == "12345678901234567.01"


def test_upsert_budget_replaces_limit_for_category(repository) -> None:
    first_id = repository.upsert_budget(
        Budget(category="Food", limit_amount=Decimal("500"))
    )
    second_id = repository.upsert_budget(
        Budget(category="Food", limit_amount=Decimal("650"))
    )

    budgets = repository.fetch_budgets()

    assert first_id == second_id
    assert len(budgets) == 1
    assert budgets[0].limit_amount == Decimal("650")


def test_delete_reports_whether_a_row_was_removed(repository) -> None:
    transaction_id = repository.add_transaction(_tx("Taxi", date(2024, 4, 4)))

    assert repository.delete_transaction(transaction_id) is True
    assert repository.delete_transaction(transaction_id) is False
    assert repository.delete_goal(12345) is False
    assert repository.delete_budget(12345) is False


def test_storage_failures_raise_ledger_storage_error() -> None:
    engine = MagicMock()
    engine.connect.side_effect = OperationalError("SELECT", {}, Exception("down"))
    repository = SqlAlchemyLedgerRepository(_DbPort(engine))

    with pytest.raises(LedgerStorageError):
        repository.fetch_transactions()
