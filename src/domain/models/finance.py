"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class FinancialSummary:
    """Normalized financial summary for a period.

    Attributes:
        sales: Gross sales amount.
        commissions: Marketplace commissions.
        delivery: Delivery costs.
        returns: Return costs.
        ads: Advertising costs.
        services: Marketplace service fees.
        total_income: Income total.
        total_expenses: Expense total.
        net_profit: Income minus expenses.
    """

    sales: Decimal
    commissions: Decimal
    delivery: Decimal
    returns: Decimal
    ads: Decimal
    services: Decimal
    total_income: Decimal
    total_expenses: Decimal
    net_profit: Decimal


@dataclass(frozen=True)
class CategoryShare:
    """Share of a category in the summary total, ready for charts."""

    category: str
    amount: Decimal
    percentage: Decimal
    color: str


@dataclass(frozen=True)
class TransactionBreakdownRow:
    """Simplified breakdown of a single ledger entry."""

    date: date
    posting_number: str
    sales: Decimal
    commissions: Decimal
    delivery: Decimal
    returns: Decimal
    ads: Decimal
    services: Decimal
    net_profit: Decimal
    operation_type: str


class SummarySource(str, Enum):
    """Path that produced a financial summary."""

    PRIMARY = "primary"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class SummaryResolution:
    """Summary together with the path that produced it."""

    summary: FinancialSummary
    source: SummarySource
    warnings: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class FinanceOverview:
    """Summary and category breakdown for UI rendering."""

    summary: FinancialSummary
    categories: list[CategoryShare]
    source: SummarySource
    warnings: tuple[str, ...] = field(default_factory=tuple)


__all__ = [
    "FinancialSummary",
    "CategoryShare",
    "TransactionBreakdownRow",
    "SummarySource",
    "SummaryResolution",
    "FinanceOverview",
]
