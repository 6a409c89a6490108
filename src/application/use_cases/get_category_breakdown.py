"""Use case to compute expenses by category."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.load_ledger import resolve_snapshot
from src.domain.models import CategoryAmount, LedgerSnapshot
from src.domain.services.aggregation import compute_category_breakdown
from src.infrastructure.logging.logger import get_app_logger


class GetCategoryBreakdownUseCase:
    """Aggregate expense amounts per category."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        snapshot: LedgerSnapshot | None = None,
    ) -> list[CategoryAmount]:
        """Return expense categories sorted by amount, largest first."""
        ledger = resolve_snapshot(self._ledger_repository, snapshot)
        categories = compute_category_breakdown(ledger.transactions)
        self._logger.info(
            f"Computed spend for {len(categories)} categories"
        )
        return categories


__all__ = ["GetCategoryBreakdownUseCase", "CategoryAmount"]
