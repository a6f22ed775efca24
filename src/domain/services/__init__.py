"""Domain services package."""

from .breakdown import build_category_breakdown
from .finance import (
    estimate_summary_from_postings,
    summary_from_aggregate_row,
    zero_summary,
)
from .ledger import map_ledger_entry

__all__ = [
    "build_category_breakdown",
    "estimate_summary_from_postings",
    "summary_from_aggregate_row",
    "zero_summary",
    "map_ledger_entry",
]
