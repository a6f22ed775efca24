"""SQLAlchemy repository for marketplace finance data."""

from datetime import date, datetime

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.constants import CANCELLED_STATUS
from src.domain.models import (
    DateType,
    FinanceSummaryRow,
    LedgerEntryRow,
    PostingRow,
)
from src.utils.decimal_utils import to_decimal


class SqlAlchemyFinanceRepository(FinanceRepositoryPort):
    """Repository reading the analytics database for finance computations."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the analytics engine.
        """
        self._db_port = db_port

    def fetch_finance_summary(
        self,
        start_date: date,
        end_date: date,
        date_type: DateType,
        sku: int | None = None,
        region: str | None = None,
    ) -> FinanceSummaryRow | None:
        query = text(
            """
            SELECT total_sales,
                   total_commissions,
                   total_delivery,
                   total_returns,
                   total_ads,
                   total_services,
                   total_income,
                   total_expenses,
                   net_profit
            FROM get_finance_summary(
                :start_date,
                :end_date,
                :date_type,
                :sku_filter,
                :region_filter
            )
            """
        )
        params = {
            "start_date": start_date.isoformat(),
            "end_date": end_date.isoformat(),
            "date_type": DateType(date_type).value,
            "sku_filter": sku,
            "region_filter": region or None,
        }
        engine = self._db_port.get_analytics_engine()
        with engine.connect() as conn:
            row = conn.execute(query, params).first()
        if row is None:
            return None
        return FinanceSummaryRow(
            total_sales=to_decimal(row.total_sales),
            total_commissions=to_decimal(row.total_commissions),
            total_delivery=to_decimal(row.total_delivery),
            total_returns=to_decimal(row.total_returns),
            total_ads=to_decimal(row.total_ads),
            total_services=to_decimal(row.total_services),
            total_income=to_decimal(row.total_income),
            total_expenses=to_decimal(row.total_expenses),
            net_profit=to_decimal(row.net_profit),
        )

    def fetch_postings(
        self,
        start_date: date,
        end_date: date,
        sku: int | None = None,
    ) -> list[PostingRow]:
        base_sql = """
        SELECT price, quantity, commission_amount
        FROM postings_fbs
        WHERE CAST(order_date AS DATE) >= :start_date
          AND CAST(order_date AS DATE) <= :end_date
          AND status <> :cancelled_status
        """
        params: dict[str, object] = {
            "start_date": start_date,
            "end_date": end_date,
            "cancelled_status": CANCELLED_STATUS,
        }
        if sku is not None:
            base_sql += " AND sku = :sku"
            params["sku"] = sku
        engine = self._db_port.get_analytics_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(base_sql), params).all()
        return [
            PostingRow(
                price=to_decimal(row.price),
                quantity=to_decimal(row.quantity),
                commission_amount=to_decimal(row.commission_amount),
            )
            for row in rows
        ]

    def fetch_ledger_entries(
        self,
        start_date: date,
        end_date: date,
        limit: int,
    ) -> list[LedgerEntryRow]:
        query = text(
            """
            SELECT operation_id,
                   posting_number,
                   operation_type,
                   operation_type_name,
                   operation_date,
                   amount,
                   type
            FROM transactions
            WHERE CAST(operation_date AS DATE) >= :start_date
              AND CAST(operation_date AS DATE) <= :end_date
            ORDER BY operation_date DESC
            LIMIT :limit
            """
        )
        params = {
            "start_date": start_date,
            "end_date": end_date,
            "limit": limit,
        }
        engine = self._db_port.get_analytics_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [
            LedgerEntryRow(
                operation_id=(
                    str(row.operation_id)
                    if row.operation_id is not None
                    else None
                ),
                posting_number=row.posting_number,
                operation_type=row.operation_type,
                operation_type_name=row.operation_type_name,
                operation_date=self._coerce_date(row.operation_date),
                amount=to_decimal(row.amount),
                type=row.type,
            )
            for row in rows
        ]

    @staticmethod
    def _coerce_date(value) -> date | None:
        """Normalize SQL date, timestamp or ISO string values to a date."""
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return date.fromisoformat(str(value)[:10])
        except ValueError:
            return None


__all__ = ["SqlAlchemyFinanceRepository"]
