"""Use case to estimate contribution and income tax on ledger income."""

from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.load_ledger import resolve_snapshot
from src.domain.models import LedgerSnapshot, TaxBreakdown, TaxTable
from src.domain.services.aggregation import compute_summary
from src.domain.services.taxes import compute_taxes
from src.infrastructure.logging.logger import get_app_logger


class ComputeTaxesUseCase:
    """Apply a fiscal-year bracket table to the ledger's gross income."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        tax_table: TaxTable,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger records.
            tax_table: Bracket configuration for the fiscal year.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._tax_table = tax_table
        self._logger = logger or get_app_logger()

    def execute(
        self,
        gross_income: Decimal | None = None,
        snapshot: LedgerSnapshot | None = None,
    ) -> TaxBreakdown:
        """Return the tax breakdown.

        Args:
            gross_income: Explicit gross income; defaults to the total income
                recorded in the ledger.
            snapshot: Optional snapshot already loaded for this request.

        Returns:
            TaxBreakdown: Contribution, income tax and net income.
        """
        if gross_income is None:
            ledger = resolve_snapshot(self._ledger_repository, snapshot)
            summary = compute_summary(ledger.transactions, ledger.investments)
            gross_income = summary.total_income
        breakdown = compute_taxes(gross_income, self._tax_table)
        self._logger.info(
            f"Taxes computed for fiscal_year={self._tax_table.fiscal_year}: "
            f"gross={breakdown.gross_income}, "
            f"contribution={breakdown.contribution}, "
            f"income_tax={breakdown.income_tax}"
        )
        return breakdown


__all__ = ["ComputeTaxesUseCase", "TaxBreakdown"]
