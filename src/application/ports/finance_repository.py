"""Port for marketplace finance reads."""

from datetime import date
from typing import Protocol

from src.domain.models import (
    DateType,
    FinanceSummaryRow,
    LedgerEntryRow,
    PostingRow,
)


class FinanceRepositoryPort(Protocol):
    """Port exposing the finance data needed by dashboard computations."""

    def fetch_finance_summary(
        self,
        start_date: date,
        end_date: date,
        date_type: DateType,
        sku: int | None = None,
        region: str | None = None,
    ) -> FinanceSummaryRow | None:
        """Return the pre-computed summary row, or None when empty."""

    def fetch_postings(
        self,
        start_date: date,
        end_date: date,
        sku: int | None = None,
    ) -> list[PostingRow]:
        """Return non-cancelled postings within the period."""

    def fetch_ledger_entries(
        self,
        start_date: date,
        end_date: date,
        limit: int,
    ) -> list[LedgerEntryRow]:
        """Return the most recent ledger entries within the period."""


__all__ = ["FinanceRepositoryPort"]
