"""Use case to read one consistent ledger snapshot per request."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import LedgerSnapshot
from src.infrastructure.logging.logger import get_app_logger


class LoadLedgerUseCase:
    """Fetch the full ledger once so every calculation shares it."""

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

    def execute(self) -> LedgerSnapshot:
        """Return the current ledger snapshot."""
        snapshot = self._ledger_repository.fetch_snapshot()
        self._logger.info(
            f"Loaded ledger snapshot: transactions={len(snapshot.transactions)}, "
            f"investments={len(snapshot.investments)}, "
            f"goals={len(snapshot.goals)}, budgets={len(snapshot.budgets)}"
        )
        return snapshot


def resolve_snapshot(
    ledger_repository: LedgerRepositoryPort,
    snapshot: LedgerSnapshot | None,
) -> LedgerSnapshot:
    """Return the given snapshot, or fetch one when none was passed."""
    if snapshot is not None:
        return snapshot
    return ledger_repository.fetch_snapshot()


__all__ = ["LoadLedgerUseCase", "resolve_snapshot"]
