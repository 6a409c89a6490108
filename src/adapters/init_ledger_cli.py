"""CLI adapter creating the ledger tables.

This module wires the ledger repository to the concrete database adapter
and provides a command-line entry point for preparing a fresh database.
"""

from src.infrastructure.container import (
    build_database_adapter,
    build_ledger_repository,
)
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Create the ledger schema when missing."""
    logger = get_app_logger()
    db_adapter = build_database_adapter()
    repository = build_ledger_repository(db_adapter)

    repository.prepare_schema()

    logger.info("Ledger schema is ready.")
    print("Ledger schema is ready.")


if __name__ == "__main__":  # pragma: no cover
    main()
