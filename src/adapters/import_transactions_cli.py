"""CLI adapter importing transactions from a CSV file."""

import argparse
from pathlib import Path

from src.application.use_cases.import_transactions import (
    ImportTransactionsUseCase,
)
from src.infrastructure.container import build_ledger_repository
from src.infrastructure.logging.logger import get_app_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Import transactions from a CSV file with the columns "
            "description, amount, type, category, date."
        )
    )
    parser.add_argument("path", type=Path, help="CSV file to import")
    parser.add_argument(
        "--delimiter",
        default=",",
        help="Field separator (default: ',')",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="File encoding (default: utf-8)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the import and print how many rows were stored.

    Args:
        argv: Optional argument list, defaults to ``sys.argv[1:]``.

    Returns:
        int: Process exit code.
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    if not args.path.exists():
        logger.error(f"Import file not found: {args.path}")
        print(f"File not found: {args.path}")
        return 1

    repository = build_ledger_repository()
    repository.prepare_schema()
    use_case = ImportTransactionsUseCase(
        ledger_repository=repository,
        logger=logger,
        delimiter=args.delimiter,
    )
    result = use_case.execute(args.path.read_text(encoding=args.encoding))

    print(f"Imported {result.imported_count} transactions from {args.path}.")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
