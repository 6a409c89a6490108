"""SQLAlchemy-backed repository for ledger records."""

from contextlib import contextmanager
from dataclasses import asdict
from datetime import date
from decimal import Decimal

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.errors import LedgerStorageError
from src.domain.models import (
    Budget,
    Goal,
    Investment,
    LedgerSnapshot,
    Transaction,
)
from src.utils.decimal_utils import coerce_decimal


CREATE_TABLES_SQL = (
    """
    CREATE TABLE IF NOT EXISTS transactions (
        id INTEGER PRIMARY KEY,
        description TEXT NOT NULL,
        amount TEXT NOT NULL,
        type TEXT NOT NULL CHECK (
            type IN (
                'fixed_income',
                'variable_income',
                'fixed_expense',
                'variable_expense'
            )
        ),
        category TEXT NOT NULL,
        date TEXT NOT NULL,
        is_recurring INTEGER NOT NULL DEFAULT 0,
        installments INTEGER NOT NULL DEFAULT 1,
        start_date TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS investments (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL,
        amount TEXT NOT NULL,
        type TEXT NOT NULL,
        expected_return TEXT,
        date TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS goals (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL,
        target_amount TEXT NOT NULL,
        current_amount TEXT NOT NULL DEFAULT '0',
        deadline TEXT NOT NULL,
        category TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS budgets (
        id INTEGER PRIMARY KEY,
        category TEXT NOT NULL UNIQUE,
        limit_amount TEXT NOT NULL,
        period TEXT NOT NULL DEFAULT 'monthly'
    )
    """,
)

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT id, description, amount, type, category, date,
           is_recurring, installments, start_date
    FROM transactions
    ORDER BY date DESC, id DESC
    """
)

SELECT_INVESTMENTS_SQL = text(
    """
    SELECT id, name, amount, type, expected_return, date
    FROM investments
    ORDER BY date DESC, id DESC
    """
)

SELECT_GOALS_SQL = text(
    """
    SELECT id, name, target_amount, current_amount, deadline, category
    FROM goals
    ORDER BY id
    """
)

SELECT_BUDGETS_SQL = text(
    """
    SELECT id, category, limit_amount, period
    FROM budgets
    ORDER BY id
    """
)

INSERT_TRANSACTION_SQL = text(
    """
    INSERT INTO transactions (
        description, amount, type, category, date,
        is_recurring, installments, start_date
    )
    VALUES (
        :description, :amount, :type, :category, :date,
        :is_recurring, :installments, :start_date
    )
    RETURNING id
    """
)

INSERT_INVESTMENT_SQL = text(
    """
    INSERT INTO investments (name, amount, type, expected_return, date)
    VALUES (:name, :amount, :type, :expected_return, :date)
    RETURNING id
    """
)

INSERT_GOAL_SQL = text(
    """
    INSERT INTO goals (name, target_amount, current_amount, deadline, category)
    VALUES (:name, :target_amount, :current_amount, :deadline, :category)
    RETURNING id
    """
)

UPSERT_BUDGET_SQL = text(
    """
    INSERT INTO budgets (category, limit_amount, period)
    VALUES (:category, :limit_amount, :period)
    ON CONFLICT (category) DO UPDATE SET
        limit_amount = excluded.limit_amount,
        period = excluded.period
    RETURNING id
    """
)

DELETE_TRANSACTION_SQL = text("DELETE FROM transactions WHERE id = :id")
DELETE_GOAL_SQL = text("DELETE FROM goals WHERE id = :id")
DELETE_BUDGET_SQL = text("DELETE FROM budgets WHERE id = :id")


def _to_date(value) -> date | None:
    if value is None or isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _bind_value(value):
    """Convert Decimal and date values into driver-neutral parameters."""
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, Decimal):
        return str(value)
    return value


def _params(record, *, exclude: tuple[str, ...] = ("id",)) -> dict:
    return {
        key: _bind_value(value)
        for key, value in asdict(record).items()
        if key not in exclude
    }


@contextmanager
def _storage_errors(action: str):
    try:
        yield
    except SQLAlchemyError as exc:
        raise LedgerStorageError(f"Failed to {action}: {exc}") from exc


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for the four ledger tables."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def prepare_schema(self) -> None:
        """Create the ledger tables when they do not exist."""
        engine = self._db_port.get_ledger_engine()
        with _storage_errors("create ledger tables"):
            with engine.begin() as conn:
                for statement in CREATE_TABLES_SQL:
                    conn.exec_driver_sql(statement)

    def fetch_transactions(self) -> list[Transaction]:
        rows = self._fetch_all(SELECT_TRANSACTIONS_SQL, "read transactions")
        return [
            Transaction(
                id=row.id,
                description=row.description,
                amount=coerce_decimal(row.amount),
                type=row.type,
                category=row.category,
                date=_to_date(row.date),
                is_recurring=bool(row.is_recurring),
                installments=int(row.installments or 1),
                start_date=_to_date(row.start_date) or _to_date(row.date),
            )
            for row in rows
        ]

    def fetch_investments(self) -> list[Investment]:
        rows = self._fetch_all(SELECT_INVESTMENTS_SQL, "read investments")
        return [
            Investment(
                id=row.id,
                name=row.name,
                amount=coerce_decimal(row.amount),
                type=row.type,
                expected_return=coerce_decimal(row.expected_return),
                date=_to_date(row.date),
            )
            for row in rows
        ]

    def fetch_goals(self) -> list[Goal]:
        rows = self._fetch_all(SELECT_GOALS_SQL, "read goals")
        return [
            Goal(
                id=row.id,
                name=row.name,
                target_amount=coerce_decimal(row.target_amount),
                current_amount=coerce_decimal(row.current_amount),
                deadline=_to_date(row.deadline),
                category=row.category,
            )
            for row in rows
        ]

    def fetch_budgets(self) -> list[Budget]:
        rows = self._fetch_all(SELECT_BUDGETS_SQL, "read budgets")
        return [
            Budget(
                id=row.id,
                category=row.category,
                limit_amount=coerce_decimal(row.limit_amount),
                period=row.period,
            )
            for row in rows
        ]

    def fetch_snapshot(self) -> LedgerSnapshot:
        return LedgerSnapshot(
            transactions=tuple(self.fetch_transactions()),
            investments=tuple(self.fetch_investments()),
            goals=tuple(self.fetch_goals()),
            budgets=tuple(self.fetch_budgets()),
        )

    def add_transaction(self, transaction: Transaction) -> int:
        params = _params(transaction)
        params["start_date"] = transaction.effective_start_date.isoformat()
        params["installments"] = transaction.effective_installments
        return self._insert(INSERT_TRANSACTION_SQL, params, "store transaction")

    def add_investment(self, investment: Investment) -> int:
        return self._insert(
            INSERT_INVESTMENT_SQL,
            _params(investment),
            "store investment",
        )

    def add_goal(self, goal: Goal) -> int:
        return self._insert(INSERT_GOAL_SQL, _params(goal), "store goal")

    def upsert_budget(self, budget: Budget) -> int:
        return self._insert(UPSERT_BUDGET_SQL, _params(budget), "store budget")

    def delete_transaction(self, transaction_id: int) -> bool:
        return self._delete(
            DELETE_TRANSACTION_SQL,
            transaction_id,
            "delete transaction",
        )

    def delete_goal(self, goal_id: int) -> bool:
        return self._delete(DELETE_GOAL_SQL, goal_id, "delete goal")

    def delete_budget(self, budget_id: int) -> bool:
        return self._delete(DELETE_BUDGET_SQL, budget_id, "delete budget")

    def _fetch_all(self, query, action: str) -> list:
        engine = self._db_port.get_ledger_engine()
        with _storage_errors(action):
            with engine.connect() as conn:
                return conn.execute(query).all()

    def _insert(self, statement, params: dict, action: str) -> int:
        engine = self._db_port.get_ledger_engine()
        with _storage_errors(action):
            with engine.begin() as conn:
                return int(conn.execute(statement, params).scalar_one())

    def _delete(self, statement, entry_id: int, action: str) -> bool:
        engine = self._db_port.get_ledger_engine()
        with _storage_errors(action):
            with engine.begin() as conn:
                result = conn.execute(statement, {"id": entry_id})
        return result.rowcount > 0


__all__ = [
    "SqlAlchemyLedgerRepository",
    "CREATE_TABLES_SQL",
    "INSERT_TRANSACTION_SQL",
    "UPSERT_BUDGET_SQL",
]
