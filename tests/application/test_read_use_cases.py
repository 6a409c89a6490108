"""Tests for the read-side ledger use cases."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.compute_taxes import ComputeTaxesUseCase
from src.application.use_cases.get_budget_statuses import (
    GetBudgetStatusesUseCase,
    GetGoalStatusesUseCase,
)
from src.application.use_cases.get_category_breakdown import (
    GetCategoryBreakdownUseCase,
)
from src.application.use_cases.get_projection import GetProjectionUseCase
from src.application.use_cases.get_summary import GetSummaryUseCase
from src.application.use_cases.load_ledger import LoadLedgerUseCase
from src.domain.models import (
    Budget,
    Goal,
    Investment,
    LedgerSnapshot,
    Transaction,
)
from src.infrastructure.tax_tables import TAX_TABLE_2026


def _tx(amount: str, tx_type: str, category: str, **overrides) -> Transaction:
    fields = {
        "description": f"{category} entry",
        "amount": Decimal(amount),
        "type": tx_type,
        "category": category,
        "date": date(2024, 1, 10),
    }
    fields.update(overrides)
    return Transaction(**fields)


def _snapshot() -> LedgerSnapshot:
    return LedgerSnapshot(
        transactions=(
            _tx("5000", "fixed_income", "Salary", is_recurring=True,
                installments=12),
            _tx("1500", "fixed_expense", "Housing", is_recurring=True,
                installments=12),
            _tx("750", "variable_expense", "Food"),
        ),
        investments=(
            Investment(
                name="Treasury",
                amount=Decimal("2000"),
                type="fixed",
                expected_return=Decimal("11"),
                date=date(2024, 1, 2),
            ),
        ),
        goals=(
            Goal(
                name="Emergency fund",
                target_amount=Decimal("10000"),
                current_amount=Decimal("2500"),
                deadline=date(2025, 12, 31),
                category="Savings",
            ),
        ),
        budgets=(
            Budget(category="Food", limit_amount=Decimal("500"), id=1),
            Budget(category="Housing", limit_amount=Decimal("2000"), id=2),
        ),
    )


def _repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_snapshot.return_value = _snapshot()
    return repository


def test_load_ledger_fetches_snapshot_once() -> None:
    repository = _repository()
    logger = MagicMock()

    snapshot = LoadLedgerUseCase(repository, logger=logger).execute()

    assert snapshot == _snapshot()
    repository.fetch_snapshot.assert_called_once_with()
    logger.info.assert_called_once()


def test_get_summary_uses_repository_snapshot() -> None:
    summary = GetSummaryUseCase(_repository(), logger=MagicMock()).execute()

    assert summary.total_income == Decimal("5000")
    assert summary.total_expense == Decimal("2250")
    assert summary.available_balance == Decimal("2750")
    assert summary.total_invested == Decimal("2000")


def test_passed_snapshot_skips_repository_read() -> None:
    """A snapshot loaded for the request should be reused."""
    repository = MagicMock()
    use_case = GetSummaryUseCase(repository, logger=MagicMock())

    use_case.execute(snapshot=_snapshot())

    repository.fetch_snapshot.assert_not_called()


def test_get_category_breakdown_returns_expense_categories() -> None:
    categories = GetCategoryBreakdownUseCase(
        _repository(),
        logger=MagicMock(),
    ).execute()

    assert [item.category for item in categories] == ["Housing", "Food"]


def test_get_projection_starts_from_available_balance() -> None:
    use_case = GetProjectionUseCase(
        _repository(),
        logger=MagicMock(),
        default_periods=3,
    )

    points = use_case.execute(reference_date=date(2024, 1, 20))

    assert len(points) == 3
    assert points[0].period_start == date(2024, 2, 1)
    assert points[0].projected_balance == Decimal("6250")
    assert points[-1].projected_balance == Decimal("13250")


def test_get_projection_explicit_horizon_overrides_default() -> None:
    use_case = GetProjectionUseCase(_repository(), logger=MagicMock())

    points = use_case.execute(
        periods_ahead=2,
        period_unit="year",
        reference_date=date(2024, 1, 20),
    )

    assert [point.period_start for point in points] == [
        date(2025, 1, 1),
        date(2026, 1, 1),
    ]


def test_compute_taxes_defaults_to_ledger_income() -> None:
    use_case = ComputeTaxesUseCase(
        _repository(),
        TAX_TABLE_2026,
        logger=MagicMock(),
    )

    breakdown = use_case.execute()

    assert breakdown.gross_income == Decimal("5000.00")
    assert breakdown.contribution == Decimal("518.82")
    assert breakdown.net == (
        breakdown.gross_income
        - breakdown.contribution
        - breakdown.income_tax
    )


def test_compute_taxes_with_explicit_income_skips_ledger() -> None:
    repository = MagicMock()
    use_case = ComputeTaxesUseCase(
        repository,
        TAX_TABLE_2026,
        logger=MagicMock(),
    )

    breakdown = use_case.execute(gross_income=Decimal("1000"))

    assert breakdown.contribution == Decimal("75.00")
    assert breakdown.income_tax == Decimal("0.00")
    repository.fetch_snapshot.assert_not_called()


def test_budget_statuses_warn_when_over_limit() -> None:
    logger = MagicMock()

    statuses = GetBudgetStatusesUseCase(_repository(), logger=logger).execute()

    assert [status.category for status in statuses] == ["Food", "Housing"]
    assert statuses[0].percent == Decimal("150")
    assert statuses[0].alert_level == "critical"
    assert statuses[1].alert_level == "warning"
    logger.warning.assert_called_once()
    assert "Food" in logger.warning.call_args.args[0]


def test_goal_statuses_report_progress() -> None:
    statuses = GetGoalStatusesUseCase(_repository(), logger=MagicMock()).execute()

    assert statuses[0].percent == Decimal("25")
    assert statuses[0].display_percent == Decimal("25")
