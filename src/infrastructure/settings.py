"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


DEFAULT_FISCAL_YEAR = 2026
DEFAULT_PROJECTION_PERIODS = 6
DEFAULT_CURRENCY = "BRL"


@dataclass(frozen=True)
class FinanceSettings:
    """Settings for the ledger storage and calculations.

    Attributes:
        db_url: SQLAlchemy URL of the ledger database.
        fiscal_year: Fiscal year whose tax table is applied.
        tax_tables_file: Optional JSON file with extra tax tables.
        projection_periods: Default projection horizon in months.
        currency_code: Currency used for display.
    """

    db_url: str
    fiscal_year: int = DEFAULT_FISCAL_YEAR
    tax_tables_file: Optional[Path] = None
    projection_periods: int = DEFAULT_PROJECTION_PERIODS
    currency_code: str = DEFAULT_CURRENCY

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        db_url = os.getenv("FINANCE_DB_URL") or cls._default_db_url()
        fiscal_year = cls._read_int(
            "FINANCE_FISCAL_YEAR",
            DEFAULT_FISCAL_YEAR,
            logger,
        )
        projection_periods = cls._read_int(
            "FINANCE_PROJECTION_PERIODS",
            DEFAULT_PROJECTION_PERIODS,
            logger,
        )
        raw_tables = os.getenv("FINANCE_TAX_TABLES")
        tax_tables_file = (
            cls._normalize_path(raw_tables, logger) if raw_tables else None
        )
        currency_code = (
            os.getenv("FINANCE_CURRENCY", DEFAULT_CURRENCY).strip().upper()
            or DEFAULT_CURRENCY
        )
        return cls(
            db_url=db_url,
            fiscal_year=fiscal_year,
            tax_tables_file=tax_tables_file,
            projection_periods=projection_periods,
            currency_code=currency_code,
        )

    @staticmethod
    def _default_db_url() -> str:
        """Return the SQLite URL of the bundled data directory."""
        data_dir = get_project_root() / "data"
        return f"sqlite:///{data_dir / 'finance.db'}"

    @staticmethod
    def _read_int(name: str, default: int, logger) -> int:
        """Read a positive integer variable, falling back on bad input.

        Args:
            name: Environment variable name.
            default: Value used when missing or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        if value < 0:
            logger.warning(f"Negative {name}={raw!r}; using {default}")
            return default
        return value

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize a file path and warn when it does not exist."""
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Tax tables file does not exist at {path}")
        return path


__all__ = ["FinanceSettings"]
