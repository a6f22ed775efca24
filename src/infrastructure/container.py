"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_repository import FinanceRepositoryPort
from src.application.use_cases.get_finance_overview import (
    GetFinanceOverviewUseCase,
)
from src.application.use_cases.get_finance_summary import (
    GetFinanceSummaryUseCase,
)
from src.application.use_cases.get_transaction_breakdown import (
    GetTransactionBreakdownUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.finance_repository import SqlAlchemyFinanceRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import FinanceSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_finance_repository(
    db_port: DatabaseEnginePort | None = None,
) -> FinanceRepositoryPort:
    """Return the finance repository for dashboard reads."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyFinanceRepository(resolved_db)


def build_finance_overview_use_case(
    repository: FinanceRepositoryPort | None = None,
    settings: FinanceSettings | None = None,
) -> GetFinanceOverviewUseCase:
    """Return the overview use case wired with the summary resolver."""
    resolved_settings = settings or FinanceSettings.from_env()
    summary_use_case = GetFinanceSummaryUseCase(
        finance_repository=repository or build_finance_repository(),
        logger=get_app_logger(),
        fallback_ratios=resolved_settings.fallback_ratios,
    )
    return GetFinanceOverviewUseCase(summary_use_case)


def build_transaction_breakdown_use_case(
    repository: FinanceRepositoryPort | None = None,
    settings: FinanceSettings | None = None,
) -> GetTransactionBreakdownUseCase:
    """Return the ledger breakdown use case."""
    resolved_settings = settings or FinanceSettings.from_env()
    return GetTransactionBreakdownUseCase(
        finance_repository=repository or build_finance_repository(),
        logger=get_app_logger(),
        timezone=resolved_settings.timezone,
    )


__all__ = [
    "build_database_adapter",
    "build_finance_repository",
    "build_finance_overview_use_case",
    "build_transaction_breakdown_use_case",
]
