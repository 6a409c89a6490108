"""Tests for contribution and income tax calculations."""

from decimal import Decimal

import pytest

from src.domain.models import TaxTable
from src.domain.models.tax import ContributionBracket, IncomeTaxBracket
from src.domain.services.taxes import (
    compute_taxes,
    contribution_for,
    income_tax_for,
)
from src.infrastructure.tax_tables import TAX_TABLE_2026


SIMPLE_CONTRIBUTION = (
    ContributionBracket(Decimal("1000"), Decimal("0.10")),
    ContributionBracket(Decimal("2000"), Decimal("0.20")),
)

# Continuous by construction: 2000*0.1-100 == 2000*0.2-300 == 100.
SIMPLE_INCOME_TAX = (
    IncomeTaxBracket(Decimal("1000"), Decimal("0"), Decimal("0")),
    IncomeTaxBracket(Decimal("2000"), Decimal("0.1"), Decimal("100")),
    IncomeTaxBracket(None, Decimal("0.2"), Decimal("300")),
)


def test_contribution_is_marginal_per_bracket() -> None:
    """Only the slice inside each bracket should use its rate."""
    assert contribution_for(Decimal("1500"), SIMPLE_CONTRIBUTION) == (
        Decimal("200")
    )
    assert contribution_for(Decimal("1000"), SIMPLE_CONTRIBUTION) == (
        Decimal("100")
    )


def test_contribution_above_top_bound_uses_ceiling() -> None:
    assert contribution_for(
        Decimal("9000"),
        SIMPLE_CONTRIBUTION,
        ceiling=Decimal("250"),
    ) == Decimal("250")
    assert contribution_for(Decimal("9000"), SIMPLE_CONTRIBUTION) == (
        Decimal("300")
    )


def test_contribution_for_builtin_table_example() -> None:
    """2000 gross pays 105.90 on the first bracket plus 52.92 on the second."""
    contribution = contribution_for(
        Decimal("2000"),
        TAX_TABLE_2026.contribution_brackets,
        TAX_TABLE_2026.contribution_ceiling,
    )

    assert contribution == Decimal("158.82")


def test_builtin_contribution_is_capped() -> None:
    breakdown = compute_taxes(Decimal("20000"), TAX_TABLE_2026)

    assert breakdown.contribution == Decimal("908.85")


def test_income_tax_uses_rate_minus_deduction() -> None:
    assert income_tax_for(Decimal("1500"), SIMPLE_INCOME_TAX) == Decimal("50")
    assert income_tax_for(Decimal("3000"), SIMPLE_INCOME_TAX) == Decimal("300")


def test_income_tax_is_zero_in_exempt_bracket() -> None:
    assert income_tax_for(Decimal("900"), SIMPLE_INCOME_TAX) == Decimal("0")
    assert income_tax_for(
        Decimal("2259.20"),
        TAX_TABLE_2026.income_tax_brackets,
    ) == Decimal("0")


def test_income_tax_never_negative() -> None:
    brackets = (IncomeTaxBracket(None, Decimal("0.1"), Decimal("500")),)

    assert income_tax_for(Decimal("1000"), brackets) == Decimal("0")


def test_income_tax_is_continuous_at_bracket_bounds() -> None:
    """Tax just below and just above a bound should match."""
    for bound in (Decimal("1000"), Decimal("2000")):
        below = income_tax_for(bound, SIMPLE_INCOME_TAX)
        above = income_tax_for(bound + Decimal("0.0001"), SIMPLE_INCOME_TAX)
        assert abs(above - below) <= Decimal("0.001")


def test_builtin_income_tax_is_continuous_within_a_cent() -> None:
    brackets = TAX_TABLE_2026.income_tax_brackets
    for bracket in brackets[:-1]:
        below = income_tax_for(bracket.upper_bound, brackets)
        above = income_tax_for(bracket.upper_bound + Decimal("0.01"), brackets)
        assert abs(above - below) <= Decimal("0.01")


def test_compute_taxes_combines_contribution_and_income_tax() -> None:
    table = TaxTable(
        fiscal_year=2030,
        contribution_brackets=SIMPLE_CONTRIBUTION,
        income_tax_brackets=SIMPLE_INCOME_TAX,
    )

    breakdown = compute_taxes(Decimal("2000"), table)

    assert breakdown.contribution == Decimal("300.00")
    assert breakdown.income_tax == Decimal("70.00")
    assert breakdown.net == Decimal("1630.00")
    assert breakdown.total_deductions == Decimal("370.00")


def test_compute_taxes_rounds_to_cents() -> None:
    breakdown = compute_taxes(Decimal("3000"), TAX_TABLE_2026)

    assert breakdown.contribution == Decimal("258.82")
    assert breakdown.income_tax == Decimal("36.15")
    assert breakdown.net == Decimal("2705.03")


@pytest.mark.parametrize("gross", [Decimal("0"), Decimal("-10")])
def test_compute_taxes_non_positive_gross_is_zero(gross: Decimal) -> None:
    breakdown = compute_taxes(gross, TAX_TABLE_2026)

    assert breakdown.contribution == Decimal("0")
    assert breakdown.income_tax == Decimal("0")
    assert breakdown.net == breakdown.gross_income


def test_tax_table_rejects_unordered_brackets() -> None:
    with pytest.raises(ValueError):
        TaxTable(
            fiscal_year=2030,
            contribution_brackets=tuple(reversed(SIMPLE_CONTRIBUTION)),
            income_tax_brackets=SIMPLE_INCOME_TAX,
        )


def test_tax_table_rejects_open_bound_before_last() -> None:
    with pytest.raises(ValueError):
        TaxTable(
            fiscal_year=2030,
            contribution_brackets=SIMPLE_CONTRIBUTION,
            income_tax_brackets=(
                IncomeTaxBracket(None, Decimal("0.1")),
                IncomeTaxBracket(Decimal("5000"), Decimal("0.2")),
            ),
        )


def test_two_bracket_contribution_example() -> None:
    """2000 gross: 5% of the first 1000 plus 9% of the next 1000."""
    brackets = (
        ContributionBracket(Decimal("1000"), Decimal("0.05")),
        ContributionBracket(Decimal("3000"), Decimal("0.09")),
    )

    assert contribution_for(Decimal("2000"), brackets) == Decimal("140")
