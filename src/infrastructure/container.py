"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import TaxTable
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.settings import FinanceSettings
from src.infrastructure.tax_tables import load_tax_tables, resolve_tax_table


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the ledger repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_tax_table(
    settings: FinanceSettings | None = None,
) -> TaxTable:
    """Return the tax table of the configured fiscal year."""
    resolved = settings or FinanceSettings.from_env()
    tables = load_tax_tables(resolved.tax_tables_file)
    return resolve_tax_table(resolved.fiscal_year, tables)


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_tax_table",
]
