"""Domain models for dashboard filter state."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class DateType(str, Enum):
    """Date field the remote aggregation groups postings by."""

    ORDER = "order"
    SHIPMENT = "shipment"
    DELIVERY = "delivery"


@dataclass(frozen=True)
class FinanceFilters:
    """Active filter state for the finance queries.

    Attributes:
        start_date: Inclusive lower bound of the period.
        end_date: Inclusive upper bound of the period.
        date_type: Date field used by the remote aggregation.
        sku: Optional product identifier.
        region: Optional delivery region.
    """

    start_date: date | None = None
    end_date: date | None = None
    date_type: DateType = DateType.ORDER
    sku: int | None = None
    region: str | None = None

    @property
    def has_complete_range(self) -> bool:
        """Return True when both period bounds are set."""
        return self.start_date is not None and self.end_date is not None


__all__ = ["DateType", "FinanceFilters"]
