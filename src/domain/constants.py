"""Domain constants for marketplace finance analytics."""

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType


@dataclass(frozen=True)
class CategoryDisplay:
    """Display label and color bound to a finance category."""

    label: str
    color: str


CATEGORY_DISPLAY = MappingProxyType(
    {
        "sales": CategoryDisplay(label="Продажи", color="#10b981"),
        "commissions": CategoryDisplay(label="Комиссии", color="#ef4444"),
        "delivery": CategoryDisplay(label="Доставка", color="#f59e0b"),
        "returns": CategoryDisplay(label="Возвраты", color="#8b5cf6"),
        "ads": CategoryDisplay(label="Реклама", color="#06b6d4"),
        "services": CategoryDisplay(label="Услуги", color="#84cc16"),
    }
)


@dataclass(frozen=True)
class FallbackRatios:
    """Expense ratios applied to sales when only postings are available.

    These are placeholder estimates, not measured values. They stand in for
    the delivery, returns, ads and services totals that only the remote
    aggregation can compute.

    Attributes:
        delivery: Share of sales assumed spent on delivery.
        returns: Share of sales assumed lost to returns.
        ads: Share of sales assumed spent on advertising.
        services: Share of sales assumed spent on marketplace services.
    """

    delivery: Decimal = Decimal("0.08")
    returns: Decimal = Decimal("0.02")
    ads: Decimal = Decimal("0.03")
    services: Decimal = Decimal("0.05")


DEFAULT_FALLBACK_RATIOS = FallbackRatios()

LEDGER_ENTRY_LIMIT = 100
NOT_AVAILABLE = "N/A"
CANCELLED_STATUS = "cancelled"
DEFAULT_TIMEZONE = "Europe/Moscow"


__all__ = [
    "CategoryDisplay",
    "CATEGORY_DISPLAY",
    "FallbackRatios",
    "DEFAULT_FALLBACK_RATIOS",
    "LEDGER_ENTRY_LIMIT",
    "NOT_AVAILABLE",
    "CANCELLED_STATUS",
    "DEFAULT_TIMEZONE",
]
