"""Database infrastructure for the finance dashboard.

This module exposes concrete helpers to create and reuse a SQLAlchemy engine
connected to the analytics database holding marketplace postings, ledger
transactions and the pre-computed finance summary function.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Values from a local ``.env`` file are loaded first.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a pooled engine for the marketplace analytics database.

    Args:
        db_url: SQLAlchemy URL, e.g. ``postgresql+psycopg2://...``.

    Returns:
        Engine: Engine with a small pool and pre-ping health checks.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_analytics_engine: Optional[Engine] = None


def get_analytics_engine() -> Engine:
    """Return the shared analytics engine, creating it on first use."""
    global _analytics_engine
    if _analytics_engine is None:
        db_url = _get_env_var("ANALYTICS_DB_URL")
        _analytics_engine = _create_engine(db_url)
    return _analytics_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort serving the process-wide analytics engine."""

    def get_analytics_engine(self) -> Engine:
        """Get the engine for the analytics database.

        Returns:
            Engine: SQLAlchemy engine connected to the analytics layer.
        """
        return get_analytics_engine()


__all__ = [
    "get_analytics_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
