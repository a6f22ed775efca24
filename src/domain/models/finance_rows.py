"""Domain models for raw marketplace finance rows."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class FinanceSummaryRow:
    """Row returned by the pre-computed finance summary procedure."""

    total_sales: Decimal
    total_commissions: Decimal
    total_delivery: Decimal
    total_returns: Decimal
    total_ads: Decimal
    total_services: Decimal
    total_income: Decimal
    total_expenses: Decimal
    net_profit: Decimal


@dataclass(frozen=True)
class PostingRow:
    """Row representing a single non-cancelled order posting."""

    price: Decimal
    quantity: Decimal
    commission_amount: Decimal


@dataclass(frozen=True)
class LedgerEntryRow:
    """Row representing a raw ledger transaction."""

    operation_id: str | None
    posting_number: str | None
    operation_type: str | None
    operation_type_name: str | None
    operation_date: date | None
    amount: Decimal
    type: str | None


__all__ = ["FinanceSummaryRow", "PostingRow", "LedgerEntryRow"]
