"""Domain models for progressive tax tables."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ContributionBracket:
    """Marginal social contribution bracket.

    Attributes:
        upper_bound: Inclusive upper income bound of the bracket.
        rate: Rate applied to the income slice inside the bracket.
    """

    upper_bound: Decimal
    rate: Decimal


@dataclass(frozen=True)
class IncomeTaxBracket:
    """Income tax bracket using the ``base * rate - deduction`` formula.

    Attributes:
        upper_bound: Inclusive upper bound of the taxable base, or None for
            the open-ended top bracket.
        rate: Rate applied to the whole taxable base.
        deduction: Fixed amount subtracted to account for lower brackets.
    """

    upper_bound: Decimal | None
    rate: Decimal
    deduction: Decimal = Decimal("0")


@dataclass(frozen=True)
class TaxTable:
    """Bracket configuration for one fiscal year.

    Attributes:
        fiscal_year: Year the brackets apply to.
        contribution_brackets: Ascending contribution brackets.
        income_tax_brackets: Ascending income tax brackets.
        contribution_ceiling: Flat contribution above the top bracket. When
            None, the contribution accumulated at the top bound is used.
    """

    fiscal_year: int
    contribution_brackets: tuple[ContributionBracket, ...]
    income_tax_brackets: tuple[IncomeTaxBracket, ...]
    contribution_ceiling: Decimal | None = None

    def __post_init__(self) -> None:
        if not self.contribution_brackets:
            raise ValueError("Tax table needs at least one contribution bracket")
        if not self.income_tax_brackets:
            raise ValueError("Tax table needs at least one income tax bracket")
        _check_ascending(
            [bracket.upper_bound for bracket in self.contribution_brackets],
            "contribution",
        )
        bounds = [bracket.upper_bound for bracket in self.income_tax_brackets]
        if any(bound is None for bound in bounds[:-1]):
            raise ValueError(
                "Only the last income tax bracket may be open-ended"
            )
        _check_ascending(
            [bound for bound in bounds if bound is not None],
            "income tax",
        )


@dataclass(frozen=True)
class TaxBreakdown:
    """Contribution, income tax and net income for a gross amount."""

    gross_income: Decimal
    contribution: Decimal
    income_tax: Decimal
    net: Decimal

    @property
    def total_deductions(self) -> Decimal:
        return self.contribution + self.income_tax


def _check_ascending(bounds: list[Decimal], label: str) -> None:
    for lower, upper in zip(bounds, bounds[1:]):
        if upper <= lower:
            raise ValueError(
                f"{label} brackets must have strictly ascending bounds"
            )


__all__ = [
    "ContributionBracket",
    "IncomeTaxBracket",
    "TaxTable",
    "TaxBreakdown",
]
