"""Use case to compute the ledger summary."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.load_ledger import resolve_snapshot
from src.domain.models import LedgerSnapshot, LedgerSummary
from src.domain.services.aggregation import compute_summary
from src.infrastructure.logging.logger import get_app_logger


class GetSummaryUseCase:
    """Compute per-type totals and the available balance."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, snapshot: LedgerSnapshot | None = None) -> LedgerSummary:
        """Return the summary of the full ledger.

        Args:
            snapshot: Optional snapshot already loaded for this request.

        Returns:
            LedgerSummary: Totals per transaction type and invested total.
        """
        ledger = resolve_snapshot(self._ledger_repository, snapshot)
        summary = compute_summary(ledger.transactions, ledger.investments)
        self._logger.info(
            f"Summary computed: income={summary.total_income}, "
            f"expenses={summary.total_expense}, "
            f"invested={summary.total_invested}"
        )
        return summary


__all__ = ["GetSummaryUseCase", "LedgerSummary"]
