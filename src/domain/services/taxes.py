"""Progressive social contribution and income tax calculations."""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.models.tax import (
    ContributionBracket,
    IncomeTaxBracket,
    TaxBreakdown,
    TaxTable,
)
from src.utils.decimal_utils import coerce_decimal, to_money


def contribution_for(
    gross_income: Decimal,
    brackets: Sequence[ContributionBracket],
    ceiling: Decimal | None = None,
) -> Decimal:
    """Return the marginal contribution owed on a gross income.

    Each bracket taxes only the slice of income between the previous bound
    and its own bound. Above the top bound the contribution is flat.

    Args:
        gross_income: Gross income to evaluate.
        brackets: Ascending contribution brackets.
        ceiling: Flat contribution above the top bound. Defaults to the
            amount accumulated at the top bound.

    Returns:
        Decimal: Unrounded contribution.
    """
    income = coerce_decimal(gross_income)
    if income <= 0:
        return Decimal("0")
    accumulated = Decimal("0")
    lower = Decimal("0")
    for bracket in brackets:
        upper = coerce_decimal(bracket.upper_bound)
        rate = coerce_decimal(bracket.rate)
        if income <= upper:
            return accumulated + (income - lower) * rate
        accumulated += (upper - lower) * rate
        lower = upper
    if ceiling is not None:
        return coerce_decimal(ceiling)
    return accumulated


def income_tax_for(
    taxable_base: Decimal,
    brackets: Sequence[IncomeTaxBracket],
) -> Decimal:
    """Return the income tax owed on a taxable base.

    The first bracket whose bound covers the base applies
    ``base * rate - deduction``. A base above every bound uses the last
    bracket. The result never goes below zero.

    Args:
        taxable_base: Gross income minus contribution.
        brackets: Ascending income tax brackets.

    Returns:
        Decimal: Unrounded income tax.
    """
    base = coerce_decimal(taxable_base)
    if base <= 0 or not brackets:
        return Decimal("0")
    selected = brackets[-1]
    for bracket in brackets:
        if bracket.upper_bound is None or base <= bracket.upper_bound:
            selected = bracket
            break
    tax = base * coerce_decimal(selected.rate) - coerce_decimal(
        selected.deduction
    )
    return max(tax, Decimal("0"))


def compute_taxes(gross_income: Decimal, table: TaxTable) -> TaxBreakdown:
    """Compute contribution, income tax and net income.

    Args:
        gross_income: Gross income for the period.
        table: Bracket configuration for the fiscal year.

    Returns:
        TaxBreakdown: Amounts rounded to cents.
    """
    gross = to_money(gross_income)
    if gross <= 0:
        zero = to_money(0)
        return TaxBreakdown(
            gross_income=gross,
            contribution=zero,
            income_tax=zero,
            net=gross,
        )
    contribution = to_money(
        contribution_for(
            gross,
            table.contribution_brackets,
            table.contribution_ceiling,
        )
    )
    income_tax = to_money(
        income_tax_for(gross - contribution, table.income_tax_brackets)
    )
    return TaxBreakdown(
        gross_income=gross,
        contribution=contribution,
        income_tax=income_tax,
        net=gross - contribution - income_tax,
    )


__all__ = ["contribution_for", "income_tax_for", "compute_taxes"]
