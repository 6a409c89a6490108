"""Tests for the composition root."""

from src.infrastructure import container
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.settings import FinanceSettings
from src.infrastructure.tax_tables import TAX_TABLE_2026


def test_build_database_adapter_returns_sqlalchemy_adapter() -> None:
    assert isinstance(
        container.build_database_adapter(),
        SqlAlchemyDatabaseEngineAdapter,
    )


def test_build_ledger_repository_uses_given_port() -> None:
    db_port = object()

    repository = container.build_ledger_repository(db_port)

    assert isinstance(repository, SqlAlchemyLedgerRepository)
    assert repository._db_port is db_port


def test_build_tax_table_uses_configured_year() -> None:
    settings = FinanceSettings(db_url="sqlite://", fiscal_year=2026)

    assert container.build_tax_table(settings) is TAX_TABLE_2026
