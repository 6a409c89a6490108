"""Boundary validation turning raw payloads into ledger records."""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Any

from src.domain.constants import BUDGET_PERIODS, TRANSACTION_TYPES
from src.domain.errors import ValidationError
from src.domain.models import Budget, Goal, Investment, Transaction
from src.domain.services.normalization import (
    normalize_text,
    normalize_transaction_type,
)
from src.utils.decimal_utils import parse_amount


def _require_text(payload: Mapping[str, Any], field: str) -> str:
    value = normalize_text(payload.get(field))
    if value is None:
        raise ValidationError(field, "is required")
    return value


def _require_amount(
    payload: Mapping[str, Any],
    field: str,
    *,
    positive: bool = False,
    default: Decimal | None = None,
    allow_negative: bool = False,
) -> Decimal:
    raw = payload.get(field)
    if (raw is None or str(raw).strip() == "") and default is not None:
        return default
    if isinstance(raw, bool):
        raise ValidationError(field, "must be a number")
    amount = raw if isinstance(raw, Decimal) else parse_amount(raw)
    if amount is None:
        raise ValidationError(field, "must be a number")
    if positive and amount <= 0:
        raise ValidationError(field, "must be greater than zero")
    if not allow_negative and amount < 0:
        raise ValidationError(field, "must not be negative")
    return amount


def _parse_date(
    payload: Mapping[str, Any],
    field: str,
    *,
    default: date | None = None,
) -> date:
    raw = payload.get(field)
    if isinstance(raw, date):
        return raw
    text = normalize_text(raw)
    if text is None:
        if default is not None:
            return default
        raise ValidationError(field, "is required")
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise ValidationError(field, "must be a YYYY-MM-DD date") from exc


def _parse_flag(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _parse_installments(payload: Mapping[str, Any]) -> int:
    raw = payload.get("installments")
    if raw is None or str(raw).strip() == "":
        return 1
    if isinstance(raw, bool):
        raise ValidationError("installments", "must be a whole number")
    try:
        installments = int(str(raw).strip())
    except ValueError as exc:
        raise ValidationError(
            "installments", "must be a whole number"
        ) from exc
    if installments < 1:
        raise ValidationError("installments", "must be at least 1")
    return installments


def validate_transaction(payload: Mapping[str, Any]) -> Transaction:
    """Validate a transaction payload.

    Recurring entries default ``start_date`` to ``date`` and
    ``installments`` to 1. Non-recurring entries always get one
    installment starting on their own date.

    Args:
        payload: Raw fields from a form, API call or import line.

    Returns:
        Transaction: Validated record without an identifier.

    Raises:
        ValidationError: When a field is missing or malformed.
    """
    description = _require_text(payload, "description")
    amount = _require_amount(payload, "amount")
    transaction_type = normalize_transaction_type(payload.get("type"))
    if transaction_type is None:
        raise ValidationError("type", "is required")
    if transaction_type not in TRANSACTION_TYPES:
        raise ValidationError(
            "type",
            f"must be one of {', '.join(TRANSACTION_TYPES)}",
        )
    category = _require_text(payload, "category")
    booking_date = _parse_date(payload, "date")
    is_recurring = _parse_flag(payload.get("is_recurring", False))
    if is_recurring:
        installments = _parse_installments(payload)
        start_date = _parse_date(payload, "start_date", default=booking_date)
    else:
        installments = 1
        start_date = booking_date
    return Transaction(
        description=description,
        amount=amount,
        type=transaction_type,
        category=category,
        date=booking_date,
        is_recurring=is_recurring,
        installments=installments,
        start_date=start_date,
    )


def validate_investment(payload: Mapping[str, Any]) -> Investment:
    """Validate an investment payload."""
    return Investment(
        name=_require_text(payload, "name"),
        amount=_require_amount(payload, "amount"),
        type=_require_text(payload, "type"),
        expected_return=_require_amount(
            payload,
            "expected_return",
            default=Decimal("0"),
            allow_negative=True,
        ),
        date=_parse_date(payload, "date"),
    )


def validate_goal(payload: Mapping[str, Any]) -> Goal:
    """Validate a goal payload; ``current_amount`` defaults to zero."""
    return Goal(
        name=_require_text(payload, "name"),
        target_amount=_require_amount(payload, "target_amount", positive=True),
        current_amount=_require_amount(
            payload,
            "current_amount",
            default=Decimal("0"),
        ),
        deadline=_parse_date(payload, "deadline"),
        category=_require_text(payload, "category"),
    )


def validate_budget(payload: Mapping[str, Any]) -> Budget:
    """Validate a budget payload; only monthly budgets exist."""
    period = normalize_text(payload.get("period")) or BUDGET_PERIODS[0]
    if period not in BUDGET_PERIODS:
        raise ValidationError(
            "period",
            f"must be one of {', '.join(BUDGET_PERIODS)}",
        )
    return Budget(
        category=_require_text(payload, "category"),
        limit_amount=_require_amount(payload, "limit_amount", positive=True),
        period=period,
    )


__all__ = [
    "validate_transaction",
    "validate_investment",
    "validate_goal",
    "validate_budget",
]
