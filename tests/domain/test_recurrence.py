"""Tests for recurrence calendar arithmetic."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models import Transaction
from src.domain.services.recurrence import (
    active_span,
    add_months,
    is_active_on,
    resolve_end_date,
)


def _tx(**overrides) -> Transaction:
    fields = {
        "description": "Rent",
        "amount": Decimal("1000"),
        "type": "fixed_expense",
        "category": "Housing",
        "date": date(2024, 1, 31),
    }
    fields.update(overrides)
    return Transaction(**fields)


def test_add_months_clamps_to_month_end() -> None:
    """Month-end dates should clamp instead of overflowing."""
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)
    assert add_months(date(2024, 1, 31), 2) == date(2024, 3, 31)


def test_add_months_crosses_years_both_ways() -> None:
    assert add_months(date(2024, 11, 15), 3) == date(2025, 2, 15)
    assert add_months(date(2024, 2, 15), -3) == date(2023, 11, 15)


def test_resolve_end_date_counts_start_as_first_installment() -> None:
    """A series of N installments ends N-1 months after the start."""
    assert resolve_end_date(date(2024, 1, 31), 3) == date(2024, 3, 31)
    assert resolve_end_date(date(2024, 1, 31), 2) == date(2024, 2, 29)
    assert resolve_end_date(date(2024, 5, 10), 1) == date(2024, 5, 10)


def test_resolve_end_date_rejects_zero_installments() -> None:
    with pytest.raises(ValueError):
        resolve_end_date(date(2024, 1, 1), 0)


def test_non_recurring_transaction_is_active_on_its_date_only() -> None:
    """One-off entries should span a single day."""
    tx = _tx(date=date(2024, 6, 10))

    assert active_span(tx) == (date(2024, 6, 10), date(2024, 6, 10))
    assert is_active_on(tx, date(2024, 6, 10)) is True
    assert is_active_on(tx, date(2024, 6, 11)) is False


def test_recurring_transaction_span_uses_start_date() -> None:
    """Recurring entries should be active from start to last installment."""
    tx = _tx(
        date=date(2024, 1, 5),
        is_recurring=True,
        installments=3,
        start_date=date(2024, 2, 1),
    )

    assert active_span(tx) == (date(2024, 2, 1), date(2024, 4, 1))
    assert is_active_on(tx, date(2024, 1, 31)) is False
    assert is_active_on(tx, date(2024, 4, 1)) is True
    assert is_active_on(tx, date(2024, 4, 2)) is False


def test_recurring_transaction_without_start_date_uses_booking_date() -> None:
    tx = _tx(date=date(2024, 3, 1), is_recurring=True, installments=2)

    assert active_span(tx) == (date(2024, 3, 1), date(2024, 4, 1))
