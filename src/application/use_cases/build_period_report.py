"""Use cases to build and export calendar period reports."""

import csv
import io
from dataclasses import dataclass
from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.load_ledger import resolve_snapshot
from src.domain.models import LedgerSnapshot, PeriodReportRow
from src.domain.services.reporting import build_report
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import to_money


REPORT_HEADER = ("Period", "Income", "Expenses", "Net")


@dataclass(frozen=True)
class ReportExport:
    """Rendered report ready to be written or downloaded.

    Attributes:
        filename: Suggested file name.
        content: CSV text including the header line.
        rows: Report rows the content was rendered from.
    """

    filename: str
    content: str
    rows: list[PeriodReportRow]


class BuildPeriodReportUseCase:
    """Bucket the ledger into calendar periods of one year."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        granularity: str = "monthly",
        reference_year: int | None = None,
        snapshot: LedgerSnapshot | None = None,
    ) -> list[PeriodReportRow]:
        """Return report rows for the requested granularity.

        Args:
            granularity: monthly, quarterly, semi-annual or annual.
            reference_year: Year to report on; defaults to the current year.
            snapshot: Optional snapshot already loaded for this request.

        Returns:
            list[PeriodReportRow]: Rows in calendar order.
        """
        ledger = resolve_snapshot(self._ledger_repository, snapshot)
        year = reference_year or date.today().year
        rows = build_report(ledger.transactions, granularity, year)
        self._logger.info(
            f"Built {granularity} report for {year} with {len(rows)} rows"
        )
        return rows


class ExportPeriodReportUseCase:
    """Render a period report as a CSV document."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._report_use_case = BuildPeriodReportUseCase(
            ledger_repository,
            logger=logger,
        )
        self._logger = logger or get_app_logger()

    def execute(
        self,
        granularity: str = "monthly",
        reference_year: int | None = None,
        snapshot: LedgerSnapshot | None = None,
    ) -> ReportExport:
        """Return the CSV export of the report.

        Args:
            granularity: monthly, quarterly, semi-annual or annual.
            reference_year: Year to report on; defaults to the current year.
            snapshot: Optional snapshot already loaded for this request.

        Returns:
            ReportExport: File name, CSV text and the underlying rows.
        """
        year = reference_year or date.today().year
        rows = self._report_use_case.execute(
            granularity=granularity,
            reference_year=year,
            snapshot=snapshot,
        )
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(REPORT_HEADER)
        for row in rows:
            writer.writerow(
                [
                    row.label,
                    to_money(row.income),
                    to_money(row.expenses),
                    to_money(row.net),
                ]
            )
        filename = f"report_{granularity}_{year}.csv"
        self._logger.info(f"Exported {len(rows)} report rows to {filename}")
        return ReportExport(
            filename=filename,
            content=buffer.getvalue(),
            rows=rows,
        )


__all__ = [
    "BuildPeriodReportUseCase",
    "ExportPeriodReportUseCase",
    "ReportExport",
    "REPORT_HEADER",
]
