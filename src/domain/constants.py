"""Domain constants for the personal finance ledger."""

FIXED_INCOME = "fixed_income"
VARIABLE_INCOME = "variable_income"
FIXED_EXPENSE = "fixed_expense"
VARIABLE_EXPENSE = "variable_expense"

TRANSACTION_TYPES = (
    FIXED_INCOME,
    VARIABLE_INCOME,
    FIXED_EXPENSE,
    VARIABLE_EXPENSE,
)

INCOME_TYPES = (FIXED_INCOME, VARIABLE_INCOME)
EXPENSE_TYPES = (FIXED_EXPENSE, VARIABLE_EXPENSE)

# Older ledgers stored fixed income as plain "income".
TRANSACTION_TYPE_ALIASES = {
    "income": FIXED_INCOME,
}

BUDGET_PERIOD_MONTHLY = "monthly"
BUDGET_PERIODS = (BUDGET_PERIOD_MONTHLY,)

GRANULARITY_MONTHLY = "monthly"
GRANULARITY_QUARTERLY = "quarterly"
GRANULARITY_SEMI_ANNUAL = "semi-annual"
GRANULARITY_ANNUAL = "annual"

REPORT_GRANULARITIES = (
    GRANULARITY_MONTHLY,
    GRANULARITY_QUARTERLY,
    GRANULARITY_SEMI_ANNUAL,
    GRANULARITY_ANNUAL,
)

# Months covered by one projection period unit.
PERIOD_UNIT_MONTHS = {
    "month": 1,
    "quarter": 3,
    "semester": 6,
    "year": 12,
}

BUDGET_WARNING_THRESHOLD = 70
BUDGET_CRITICAL_THRESHOLD = 90


__all__ = [
    "FIXED_INCOME",
    "VARIABLE_INCOME",
    "FIXED_EXPENSE",
    "VARIABLE_EXPENSE",
    "TRANSACTION_TYPES",
    "INCOME_TYPES",
    "EXPENSE_TYPES",
    "TRANSACTION_TYPE_ALIASES",
    "BUDGET_PERIOD_MONTHLY",
    "BUDGET_PERIODS",
    "GRANULARITY_MONTHLY",
    "GRANULARITY_QUARTERLY",
    "GRANULARITY_SEMI_ANNUAL",
    "GRANULARITY_ANNUAL",
    "REPORT_GRANULARITIES",
    "PERIOD_UNIT_MONTHS",
    "BUDGET_WARNING_THRESHOLD",
    "BUDGET_CRITICAL_THRESHOLD",
]
