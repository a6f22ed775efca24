"""Query entry points used by the dashboard interfaces.

Both queries stay inert while the date range is incomplete: they return
None without touching the repository.
"""

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models import (
    FinanceFilters,
    FinanceOverview,
    TransactionBreakdownRow,
)
from src.infrastructure.container import (
    build_finance_overview_use_case,
    build_transaction_breakdown_use_case,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import FinanceSettings


def query_finance_overview(
    filters: FinanceFilters,
    repository: FinanceRepositoryPort | None = None,
    settings: FinanceSettings | None = None,
) -> FinanceOverview | None:
    """Return the finance summary and categories for the active filters.

    Args:
        filters: Active dashboard filters.
        repository: Optional repository override.
        settings: Optional settings override.

    Returns:
        FinanceOverview | None: Overview, or None for an incomplete range.
    """
    if not filters.has_complete_range:
        return None
    get_usage_logger().info(
        f"finance_overview start={filters.start_date} end={filters.end_date} "
        f"date_type={filters.date_type.value} sku={filters.sku} "
        f"region={filters.region}"
    )
    use_case = build_finance_overview_use_case(
        repository=repository,
        settings=settings,
    )
    return use_case.execute(
        filters.start_date,
        filters.end_date,
        date_type=filters.date_type,
        sku=filters.sku,
        region=filters.region,
    )


def query_transaction_breakdown(
    filters: FinanceFilters,
    repository: FinanceRepositoryPort | None = None,
    settings: FinanceSettings | None = None,
) -> list[TransactionBreakdownRow] | None:
    """Return breakdown rows for the latest ledger entries of the period.

    Args:
        filters: Active dashboard filters; only the date range is used.
        repository: Optional repository override.
        settings: Optional settings override.

    Returns:
        list[TransactionBreakdownRow] | None: Rows, or None for an
        incomplete range.
    """
    if not filters.has_complete_range:
        return None
    get_usage_logger().info(
        f"transaction_breakdown start={filters.start_date} "
        f"end={filters.end_date}"
    )
    use_case = build_transaction_breakdown_use_case(
        repository=repository,
        settings=settings,
    )
    return use_case.execute(filters.start_date, filters.end_date)


__all__ = ["query_finance_overview", "query_transaction_breakdown"]
