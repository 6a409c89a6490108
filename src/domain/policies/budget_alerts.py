"""Alert levels for budget consumption."""

from decimal import Decimal

from src.domain.constants import (
    BUDGET_CRITICAL_THRESHOLD,
    BUDGET_WARNING_THRESHOLD,
)

ALERT_OK = "ok"
ALERT_WARNING = "warning"
ALERT_CRITICAL = "critical"


def classify_budget_alert(percent: Decimal) -> str:
    """Return the alert level for a consumption percentage.

    Args:
        percent: Budget consumption in percent.

    Returns:
        str: ``critical`` above 90, ``warning`` above 70, else ``ok``.
    """
    if percent > BUDGET_CRITICAL_THRESHOLD:
        return ALERT_CRITICAL
    if percent > BUDGET_WARNING_THRESHOLD:
        return ALERT_WARNING
    return ALERT_OK


__all__ = ["ALERT_OK", "ALERT_WARNING", "ALERT_CRITICAL", "classify_budget_alert"]
