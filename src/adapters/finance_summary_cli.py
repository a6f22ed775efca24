"""CLI adapter printing the finance summary for a period."""

from datetime import date
import os

from src.adapters.finance_queries import query_finance_overview
from src.domain.models import DateType, FinanceFilters
from src.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _parse_sku(value: str | None, logger) -> int | None:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid SKU '{value}'. Expected an integer.")
        return None


def _parse_date_type(value: str | None, logger) -> DateType:
    if not value:
        return DateType.ORDER
    try:
        return DateType(value.strip().lower())
    except ValueError:
        logger.warning(
            f"Invalid date type '{value}'. Using {DateType.ORDER.value}."
        )
        return DateType.ORDER


def main() -> None:
    """Print the finance summary and category shares for the period."""
    logger = get_app_logger()
    filters = FinanceFilters(
        start_date=_parse_date(os.getenv("FINANCE_START_DATE"), logger),
        end_date=_parse_date(os.getenv("FINANCE_END_DATE"), logger),
        date_type=_parse_date_type(os.getenv("FINANCE_DATE_TYPE"), logger),
        sku=_parse_sku(os.getenv("FINANCE_SKU"), logger),
        region=os.getenv("FINANCE_REGION") or None,
    )

    overview = query_finance_overview(filters)
    if overview is None:
        logger.warning(
            "FINANCE_START_DATE and FINANCE_END_DATE are required."
        )
        return

    summary = overview.summary
    print(
        "Finance summary "
        f"(start={filters.start_date}, end={filters.end_date}, "
        f"source={overview.source.value})"
    )
    print(
        f"income={summary.total_income:,.2f}, "
        f"expenses={summary.total_expenses:,.2f}, "
        f"net_profit={summary.net_profit:,.2f}"
    )
    for share in overview.categories:
        print(
            f"{share.category}: {share.amount:,.2f} "
            f"({share.percentage:.1f}%)"
        )
    for warning in overview.warnings:
        print(f"Warning: {warning}")


if __name__ == "__main__":  # pragma: no cover
    main()
