"""Application use cases package."""

from .get_finance_summary import GetFinanceSummaryUseCase, PrimaryAttempt
from .get_finance_overview import GetFinanceOverviewUseCase
from .get_transaction_breakdown import GetTransactionBreakdownUseCase

__all__ = [
    "GetFinanceSummaryUseCase",
    "PrimaryAttempt",
    "GetFinanceOverviewUseCase",
    "GetTransactionBreakdownUseCase",
]
