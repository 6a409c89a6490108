"""Tests for the cash-flow projection service."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models import Transaction
from src.domain.services.projection import project, recurring_flow


def _tx(amount: str, tx_type: str, **overrides) -> Transaction:
    fields = {
        "description": "entry",
        "amount": Decimal(amount),
        "type": tx_type,
        "category": "General",
        "date": date(2024, 1, 1),
    }
    fields.update(overrides)
    return Transaction(**fields)


def _ledger() -> list[Transaction]:
    return [
        _tx("3000", "fixed_income", is_recurring=True, installments=12),
        _tx("1000", "fixed_expense", is_recurring=True, installments=2),
        _tx("250", "variable_expense"),
    ]


def test_recurring_flow_ignores_one_off_entries() -> None:
    income, expense = recurring_flow(_ledger())

    assert income == Decimal("3000")
    assert expense == Decimal("1000")


def test_projection_grows_linearly_per_month() -> None:
    """Each month should add the recurring net flow to the balance."""
    points = project(
        _ledger(),
        3,
        current_balance=Decimal("500"),
        reference_date=date(2024, 1, 15),
    )

    assert [point.period_index for point in points] == [0, 1, 2]
    assert [point.period_start for point in points] == [
        date(2024, 2, 1),
        date(2024, 3, 1),
        date(2024, 4, 1),
    ]
    assert [point.projected_balance for point in points] == [
        Decimal("2500"),
        Decimal("4500"),
        Decimal("6500"),
    ]


def test_projection_is_flat_without_recurring_entries() -> None:
    points = project(
        [_tx("100", "variable_income"), _tx("40", "variable_expense")],
        4,
        current_balance=Decimal("60"),
        reference_date=date(2024, 5, 20),
    )

    assert {point.projected_balance for point in points} == {Decimal("60")}


def test_projection_period_unit_scales_flow() -> None:
    """A quarter unit should move three months of flow per period."""
    points = project(
        _ledger(),
        2,
        current_balance=Decimal("500"),
        reference_date=date(2024, 1, 15),
        period_unit="quarter",
    )

    assert points[0].period_start == date(2024, 4, 1)
    assert points[0].projected_balance == Decimal("6500")
    assert points[1].projected_balance == Decimal("12500")


def test_projection_only_active_drops_finished_series() -> None:
    points = project(
        _ledger(),
        3,
        current_balance=Decimal("500"),
        reference_date=date(2024, 1, 15),
        only_active=True,
    )

    assert [point.projected_balance for point in points] == [
        Decimal("2500"),
        Decimal("5500"),
        Decimal("8500"),
    ]


def test_projection_zero_horizon_is_empty() -> None:
    assert project(
        _ledger(),
        0,
        current_balance=Decimal("1"),
        reference_date=date(2024, 1, 1),
    ) == []


def test_projection_rejects_negative_horizon() -> None:
    with pytest.raises(ValueError):
        project(
            _ledger(),
            -1,
            current_balance=Decimal("0"),
            reference_date=date(2024, 1, 1),
        )


def test_projection_rejects_unknown_unit() -> None:
    with pytest.raises(ValueError):
        project(
            _ledger(),
            1,
            current_balance=Decimal("0"),
            reference_date=date(2024, 1, 1),
            period_unit="week",
        )
