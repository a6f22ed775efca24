"""Category breakdown derived from a financial summary."""

from collections.abc import Mapping
from decimal import Decimal

from src.domain.constants import CATEGORY_DISPLAY, CategoryDisplay
from src.domain.models import CategoryShare, FinancialSummary


def build_category_breakdown(
    summary: FinancialSummary,
    display: Mapping[str, CategoryDisplay] = CATEGORY_DISPLAY,
) -> list[CategoryShare]:
    """Build chart-ready category shares from a summary.

    Sales keep their sign; expense categories are shown as magnitudes.
    Zero categories are dropped and the rest are sorted by amount, largest
    first.

    Args:
        summary: Financial summary to break down.
        display: Category key to label and color mapping.

    Returns:
        list[CategoryShare]: Shares of ``total_income + total_expenses``.
    """
    total = summary.total_income + summary.total_expenses
    shares: list[CategoryShare] = []
    for key, category in display.items():
        value = getattr(summary, key)
        if value == 0:
            continue
        amount = value if key == "sales" else abs(value)
        percentage = (
            amount / total * Decimal("100") if total > 0 else Decimal("0")
        )
        shares.append(
            CategoryShare(
                category=category.label,
                amount=amount,
                percentage=percentage,
                color=category.color,
            )
        )
    return sorted(shares, key=lambda share: share.amount, reverse=True)


__all__ = ["build_category_breakdown"]
