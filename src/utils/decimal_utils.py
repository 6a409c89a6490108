"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_money(value) -> Decimal:
    """Quantize a value to cents using half-up rounding."""
    return coerce_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def parse_amount(raw: str | None) -> Decimal | None:
    """Parse a user-supplied amount string.

    Both ``12.50`` and ``12,50`` are accepted. Thousands separators are not.

    Args:
        raw: Raw amount text.

    Returns:
        Decimal | None: Parsed amount, or None when the text is not numeric.
    """
    if raw is None:
        return None
    cleaned = str(raw).strip().replace(",", ".", 1)
    if not cleaned:
        return None
    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not amount.is_finite():
        return None
    return amount


__all__ = ["CENT", "ZERO", "HUNDRED", "coerce_decimal", "to_money", "parse_amount"]
