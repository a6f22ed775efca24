"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from src.domain.constants import (
    DEFAULT_FALLBACK_RATIOS,
    DEFAULT_TIMEZONE,
    FallbackRatios,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class FinanceSettings:
    """Settings for the finance computations.

    Attributes:
        fallback_ratios: Expense ratios used by the postings estimate.
        timezone: IANA timezone used for "today" in the ledger view.
    """

    fallback_ratios: FallbackRatios = field(
        default_factory=lambda: DEFAULT_FALLBACK_RATIOS
    )
    timezone: str = DEFAULT_TIMEZONE

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        ratios = FallbackRatios(
            delivery=cls._read_ratio(
                "FINANCE_FALLBACK_DELIVERY_RATIO",
                DEFAULT_FALLBACK_RATIOS.delivery,
                logger,
            ),
            returns=cls._read_ratio(
                "FINANCE_FALLBACK_RETURNS_RATIO",
                DEFAULT_FALLBACK_RATIOS.returns,
                logger,
            ),
            ads=cls._read_ratio(
                "FINANCE_FALLBACK_ADS_RATIO",
                DEFAULT_FALLBACK_RATIOS.ads,
                logger,
            ),
            services=cls._read_ratio(
                "FINANCE_FALLBACK_SERVICES_RATIO",
                DEFAULT_FALLBACK_RATIOS.services,
                logger,
            ),
        )
        timezone = cls._read_timezone(logger)
        return cls(fallback_ratios=ratios, timezone=timezone)

    @staticmethod
    def _read_ratio(name: str, default: Decimal, logger) -> Decimal:
        """Read a non-negative ratio from the environment.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            Decimal: Parsed ratio.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            logger.warning(
                f"Invalid {name}='{raw}'. Using default {default}."
            )
            return default
        if not value.is_finite() or value < 0:
            logger.warning(
                f"Invalid {name}='{raw}'. Using default {default}."
            )
            return default
        return value

    @staticmethod
    def _read_timezone(logger) -> str:
        """Read and validate the timezone name from the environment."""
        raw = os.getenv("FINANCE_TIMEZONE", DEFAULT_TIMEZONE).strip()
        if not raw:
            return DEFAULT_TIMEZONE
        try:
            ZoneInfo(raw)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(
                f"Unknown timezone '{raw}'. Using {DEFAULT_TIMEZONE}."
            )
            return DEFAULT_TIMEZONE
        return raw


__all__ = ["FinanceSettings"]
