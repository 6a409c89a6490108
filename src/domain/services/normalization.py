"""Domain normalization helpers."""

from src.domain.constants import TRANSACTION_TYPE_ALIASES


def normalize_text(value) -> str | None:
    """Normalize free text values.

    Args:
        value: Raw value from a payload or import line.

    Returns:
        str | None: Stripped text, or None when empty.
    """
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


def normalize_transaction_type(value) -> str | None:
    """Normalize a transaction type name.

    Args:
        value: Raw type value from a payload or import line.

    Returns:
        str | None: Lower-case type with legacy aliases resolved.
    """
    cleaned = normalize_text(value)
    if cleaned is None:
        return None
    lowered = cleaned.lower().replace("-", "_").replace(" ", "_")
    return TRANSACTION_TYPE_ALIASES.get(lowered, lowered)


__all__ = ["normalize_text", "normalize_transaction_type"]
