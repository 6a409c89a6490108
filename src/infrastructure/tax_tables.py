"""Versioned tax bracket tables keyed by fiscal year.

The built-in table holds the estimated 2026 social contribution (INSS) and
income tax (IRPF) brackets. Extra or replacement years can be loaded from a
JSON file shaped like::

    {
        "2027": {
            "contribution_brackets": [{"upper_bound": "1500", "rate": "0.075"}],
            "contribution_ceiling": "950.00",
            "income_tax_brackets": [
                {"upper_bound": "2300", "rate": "0", "deduction": "0"},
                {"upper_bound": null, "rate": "0.275", "deduction": "900"}
            ]
        }
    }
"""

import json
from decimal import Decimal
from pathlib import Path

from src.domain.models.tax import (
    ContributionBracket,
    IncomeTaxBracket,
    TaxTable,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


TAX_TABLE_2026 = TaxTable(
    fiscal_year=2026,
    contribution_brackets=(
        ContributionBracket(Decimal("1412.00"), Decimal("0.075")),
        ContributionBracket(Decimal("2666.68"), Decimal("0.09")),
        ContributionBracket(Decimal("4000.03"), Decimal("0.12")),
        ContributionBracket(Decimal("7786.02"), Decimal("0.14")),
    ),
    contribution_ceiling=Decimal("908.85"),
    income_tax_brackets=(
        IncomeTaxBracket(Decimal("2259.20"), Decimal("0"), Decimal("0")),
        IncomeTaxBracket(Decimal("2826.65"), Decimal("0.075"), Decimal("169.44")),
        IncomeTaxBracket(Decimal("3751.05"), Decimal("0.15"), Decimal("381.44")),
        IncomeTaxBracket(Decimal("4664.68"), Decimal("0.225"), Decimal("662.77")),
        IncomeTaxBracket(None, Decimal("0.275"), Decimal("896.00")),
    ),
)

BUILTIN_TAX_TABLES: dict[int, TaxTable] = {
    TAX_TABLE_2026.fiscal_year: TAX_TABLE_2026,
}


def _optional_decimal(value) -> Decimal | None:
    if value is None:
        return None
    return coerce_decimal(value)


def parse_tax_table(fiscal_year: int, raw: dict) -> TaxTable:
    """Build a TaxTable from its JSON representation.

    Args:
        fiscal_year: Year the table applies to.
        raw: Mapping with bracket lists and an optional ceiling.

    Returns:
        TaxTable: Validated table.

    Raises:
        ValueError: If a bracket is missing a field or bounds are unordered.
    """
    try:
        contribution = tuple(
            ContributionBracket(
                upper_bound=coerce_decimal(item["upper_bound"]),
                rate=coerce_decimal(item["rate"]),
            )
            for item in raw["contribution_brackets"]
        )
        income_tax = tuple(
            IncomeTaxBracket(
                upper_bound=_optional_decimal(item.get("upper_bound")),
                rate=coerce_decimal(item["rate"]),
                deduction=coerce_decimal(item.get("deduction", "0")),
            )
            for item in raw["income_tax_brackets"]
        )
    except KeyError as exc:
        raise ValueError(
            f"Tax table {fiscal_year} is missing field {exc}"
        ) from exc
    return TaxTable(
        fiscal_year=fiscal_year,
        contribution_brackets=contribution,
        income_tax_brackets=income_tax,
        contribution_ceiling=_optional_decimal(
            raw.get("contribution_ceiling")
        ),
    )


def load_tax_tables(path: Path | None = None) -> dict[int, TaxTable]:
    """Return built-in tables merged with the tables of a JSON file.

    Args:
        path: Optional JSON file; its years override built-in ones.

    Returns:
        dict[int, TaxTable]: Tables keyed by fiscal year.
    """
    tables = dict(BUILTIN_TAX_TABLES)
    if path is None:
        return tables
    logger = get_app_logger()
    if not Path(path).exists():
        logger.warning(f"Tax tables file not found at {path}; using built-ins")
        return tables
    raw_tables = json.loads(
        Path(path).read_text(encoding="utf-8"),
        parse_float=Decimal,
    )
    for raw_year, raw_table in raw_tables.items():
        fiscal_year = int(raw_year)
        tables[fiscal_year] = parse_tax_table(fiscal_year, raw_table)
    logger.info(f"Loaded {len(raw_tables)} tax tables from {path}")
    return tables


def resolve_tax_table(
    fiscal_year: int,
    tables: dict[int, TaxTable] | None = None,
) -> TaxTable:
    """Return the table for a fiscal year.

    Raises:
        RuntimeError: If no table is configured for that year.
    """
    available = tables if tables is not None else BUILTIN_TAX_TABLES
    table = available.get(fiscal_year)
    if table is None:
        years = ", ".join(str(year) for year in sorted(available))
        raise RuntimeError(
            f"No tax table configured for fiscal year {fiscal_year}. "
            f"Available years: {years}"
        )
    return table


__all__ = [
    "TAX_TABLE_2026",
    "BUILTIN_TAX_TABLES",
    "parse_tax_table",
    "load_tax_tables",
    "resolve_tax_table",
]
