"""Database port for the finance dashboard."""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port handing out the engine of the marketplace analytics database.

    Repositories depend on this protocol rather than on connection URLs or
    pooling details.
    """

    def get_analytics_engine(self) -> Engine:
        """Return the engine holding postings, transactions and the
        pre-computed finance summary function."""


__all__ = ["DatabaseEnginePort"]
