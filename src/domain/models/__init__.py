"""Domain models package."""

from .filters import DateType, FinanceFilters
from .finance import (
    CategoryShare,
    FinanceOverview,
    FinancialSummary,
    SummaryResolution,
    SummarySource,
    TransactionBreakdownRow,
)
from .finance_rows import FinanceSummaryRow, LedgerEntryRow, PostingRow

__all__ = [
    "DateType",
    "FinanceFilters",
    "CategoryShare",
    "FinanceOverview",
    "FinancialSummary",
    "SummaryResolution",
    "SummarySource",
    "TransactionBreakdownRow",
    "FinanceSummaryRow",
    "LedgerEntryRow",
    "PostingRow",
]
