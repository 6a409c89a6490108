"""Domain policies package."""

from .budget_alerts import (
    ALERT_CRITICAL,
    ALERT_OK,
    ALERT_WARNING,
    classify_budget_alert,
)

__all__ = [
    "ALERT_OK",
    "ALERT_WARNING",
    "ALERT_CRITICAL",
    "classify_budget_alert",
]
