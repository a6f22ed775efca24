"""Mapping of raw ledger entries into breakdown rows."""

from datetime import date
from decimal import Decimal

from src.domain.constants import NOT_AVAILABLE
from src.domain.models import LedgerEntryRow, TransactionBreakdownRow
from src.utils.decimal_utils import to_decimal


def map_ledger_entry(
    entry: LedgerEntryRow,
    fallback_date: date,
) -> TransactionBreakdownRow:
    """Split a ledger entry into sales and commissions by its sign.

    Only the signed amount is known at this granularity, so delivery,
    returns, ads and services are always zero.

    Args:
        entry: Raw ledger entry.
        fallback_date: Date used when the entry has no operation date.

    Returns:
        TransactionBreakdownRow: Simplified breakdown row.
    """
    amount = to_decimal(entry.amount)
    zero = Decimal("0")
    return TransactionBreakdownRow(
        date=entry.operation_date or fallback_date,
        posting_number=entry.posting_number or NOT_AVAILABLE,
        sales=amount if amount > 0 else zero,
        commissions=abs(amount) if amount < 0 else zero,
        delivery=zero,
        returns=zero,
        ads=zero,
        services=zero,
        net_profit=amount,
        operation_type=(
            entry.operation_type_name
            or entry.operation_type
            or NOT_AVAILABLE
        ),
    )


__all__ = ["map_ledger_entry"]
