"""Use case to project the balance over future periods."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.load_ledger import resolve_snapshot
from src.domain.models import LedgerSnapshot, ProjectionPoint
from src.domain.services.aggregation import compute_summary
from src.domain.services.projection import project
from src.infrastructure.logging.logger import get_app_logger


class GetProjectionUseCase:
    """Extrapolate recurring cash flow from the current balance."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        default_periods: int = 6,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
            default_periods: Horizon used when none is requested.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._default_periods = default_periods

    def execute(
        self,
        periods_ahead: int | None = None,
        period_unit: str = "month",
        reference_date: date | None = None,
        only_active: bool = False,
        snapshot: LedgerSnapshot | None = None,
    ) -> list[ProjectionPoint]:
        """Return projected balances.

        Args:
            periods_ahead: Number of future periods; defaults to the
                configured horizon.
            period_unit: month, quarter, semester or year.
            reference_date: Projection start; defaults to today.
            only_active: Skip recurring series that ended before a period.
            snapshot: Optional snapshot already loaded for this request.

        Returns:
            list[ProjectionPoint]: One point per future period.
        """
        ledger = resolve_snapshot(self._ledger_repository, snapshot)
        horizon = (
            self._default_periods if periods_ahead is None else periods_ahead
        )
        summary = compute_summary(ledger.transactions, ledger.investments)
        points = project(
            ledger.transactions,
            horizon,
            current_balance=summary.available_balance,
            reference_date=reference_date or date.today(),
            period_unit=period_unit,
            only_active=only_active,
        )
        self._logger.info(
            f"Projected {len(points)} {period_unit} periods from "
            f"balance={summary.available_balance}"
        )
        return points


__all__ = ["GetProjectionUseCase", "ProjectionPoint"]
