"""Domain services for finance summaries."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import DEFAULT_FALLBACK_RATIOS, FallbackRatios
from src.domain.models import FinanceSummaryRow, FinancialSummary, PostingRow
from src.utils.decimal_utils import to_decimal


def zero_summary() -> FinancialSummary:
    """Return a summary with every amount set to zero."""
    zero = Decimal("0")
    return FinancialSummary(
        sales=zero,
        commissions=zero,
        delivery=zero,
        returns=zero,
        ads=zero,
        services=zero,
        total_income=zero,
        total_expenses=zero,
        net_profit=zero,
    )


def summary_from_aggregate_row(
    row: FinanceSummaryRow | None,
) -> FinancialSummary:
    """Map a pre-computed aggregate row into a financial summary.

    Totals are taken from the row as provided; only unusable values are
    replaced by zero.

    Args:
        row: Aggregate row from the summary procedure, or None when the
            procedure returned nothing.

    Returns:
        FinancialSummary: Normalized summary.
    """
    if row is None:
        return zero_summary()
    return FinancialSummary(
        sales=to_decimal(row.total_sales),
        commissions=to_decimal(row.total_commissions),
        delivery=to_decimal(row.total_delivery),
        returns=to_decimal(row.total_returns),
        ads=to_decimal(row.total_ads),
        services=to_decimal(row.total_services),
        total_income=to_decimal(row.total_income),
        total_expenses=to_decimal(row.total_expenses),
        net_profit=to_decimal(row.net_profit),
    )


def estimate_summary_from_postings(
    postings: Iterable[PostingRow],
    ratios: FallbackRatios = DEFAULT_FALLBACK_RATIOS,
) -> FinancialSummary:
    """Approximate a financial summary from raw order postings.

    Sales and commissions are summed from the postings. Delivery, returns,
    ads and services are estimated as fixed shares of sales, so the result
    is an approximation and not a substitute for the aggregate procedure.

    Args:
        postings: Non-cancelled postings for the period.
        ratios: Expense ratios applied to total sales.

    Returns:
        FinancialSummary: Estimated summary.
    """
    total_sales = Decimal("0")
    total_commissions = Decimal("0")
    for posting in postings:
        total_sales += to_decimal(posting.price) * to_decimal(posting.quantity)
        total_commissions += abs(to_decimal(posting.commission_amount))

    delivery = total_sales * ratios.delivery
    returns = total_sales * ratios.returns
    ads = total_sales * ratios.ads
    services = total_sales * ratios.services
    total_expenses = total_commissions + delivery + returns + ads + services

    return FinancialSummary(
        sales=total_sales,
        commissions=total_commissions,
        delivery=delivery,
        returns=returns,
        ads=ads,
        services=services,
        total_income=total_sales,
        total_expenses=total_expenses,
        net_profit=total_sales - total_expenses,
    )


__all__ = [
    "zero_summary",
    "summary_from_aggregate_row",
    "estimate_summary_from_postings",
]
