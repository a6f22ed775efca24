"""Domain package for business rules and core models."""

from .constants import (
    CATEGORY_DISPLAY,
    DEFAULT_FALLBACK_RATIOS,
    CategoryDisplay,
    FallbackRatios,
)
from .models import (
    CategoryShare,
    DateType,
    FinanceFilters,
    FinanceOverview,
    FinanceSummaryRow,
    FinancialSummary,
    LedgerEntryRow,
    PostingRow,
    SummaryResolution,
    SummarySource,
    TransactionBreakdownRow,
)
from .services import (
    build_category_breakdown,
    estimate_summary_from_postings,
    map_ledger_entry,
    summary_from_aggregate_row,
    zero_summary,
)

__all__ = [
    "CATEGORY_DISPLAY",
    "DEFAULT_FALLBACK_RATIOS",
    "CategoryDisplay",
    "FallbackRatios",
    "CategoryShare",
    "DateType",
    "FinanceFilters",
    "FinanceOverview",
    "FinanceSummaryRow",
    "FinancialSummary",
    "LedgerEntryRow",
    "PostingRow",
    "SummaryResolution",
    "SummarySource",
    "TransactionBreakdownRow",
    "build_category_breakdown",
    "estimate_summary_from_postings",
    "map_ledger_entry",
    "summary_from_aggregate_row",
    "zero_summary",
]
