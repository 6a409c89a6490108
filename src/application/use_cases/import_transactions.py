"""Use case to bulk import transactions from delimited text.

Each line after the header holds ``description, amount, type, category,
date``. Amounts may use a comma as decimal separator when the field is
quoted. Each line is parsed on its own: a malformed line is skipped without
affecting the lines after it, and rows already written are kept.
"""

import csv
from dataclasses import dataclass

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.errors import ValidationError
from src.domain.services.validation import validate_transaction
from src.infrastructure.logging.logger import get_app_logger


IMPORT_COLUMNS = ("description", "amount", "type", "category", "date")


@dataclass(frozen=True)
class ImportResult:
    """Result of an import run.

    Attributes:
        imported_count: Number of transactions written.
    """

    imported_count: int


class ImportTransactionsUseCase:
    """Parse delimited text and store each valid line as a transaction."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        delimiter: str = ",",
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port used to store transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            delimiter: Field separator of the input text.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._delimiter = delimiter

    def execute(self, text: str) -> ImportResult:
        """Import every parseable line of ``text``.

        Args:
            text: Delimited content including a header line.

        Returns:
            ImportResult: How many transactions were written.
        """
        imported = 0
        lines = text.splitlines()[1:]
        for line_number, line in enumerate(lines, start=2):
            if not line.strip():
                continue
            try:
                fields = self._split_line(line)
            except csv.Error as exc:
                self._logger.debug(f"Skipping import line {line_number}: {exc}")
                continue
            if len(fields) < len(IMPORT_COLUMNS):
                self._logger.debug(
                    f"Skipping import line {line_number}: "
                    f"expected {len(IMPORT_COLUMNS)} fields"
                )
                continue
            payload = dict(zip(IMPORT_COLUMNS, fields))
            payload["is_recurring"] = False
            try:
                transaction = validate_transaction(payload)
            except ValidationError as exc:
                self._logger.debug(f"Skipping import line {line_number}: {exc}")
                continue
            self._ledger_repository.add_transaction(transaction)
            imported += 1
        self._logger.info(f"Imported {imported} transactions")
        return ImportResult(imported_count=imported)

    def _split_line(self, line: str) -> list[str]:
        # A quote left open stops at the end of its own line.
        reader = csv.reader(
            [line],
            delimiter=self._delimiter,
            skipinitialspace=True,
        )
        return next(reader, [])


__all__ = ["ImportTransactionsUseCase", "ImportResult", "IMPORT_COLUMNS"]
