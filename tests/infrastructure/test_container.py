"""Tests for the composition root."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_finance_overview import (
    GetFinanceOverviewUseCase,
)
from src.application.use_cases.get_transaction_breakdown import (
    GetTransactionBreakdownUseCase,
)
from src.domain.constants import FallbackRatios
from src.infrastructure import container
from src.infrastructure.finance_repository import SqlAlchemyFinanceRepository
from src.infrastructure.settings import FinanceSettings


def test_build_finance_repository_uses_given_db_port() -> None:
    """The repository should be backed by SQLAlchemy."""
    repository = container.build_finance_repository(db_port=MagicMock())

    assert isinstance(repository, SqlAlchemyFinanceRepository)


def test_build_overview_use_case_applies_settings() -> None:
    """Configured ratios should reach the summary resolver."""
    ratios = FallbackRatios(delivery=Decimal("0.2"))
    settings = FinanceSettings(fallback_ratios=ratios)

    use_case = container.build_finance_overview_use_case(
        repository=MagicMock(),
        settings=settings,
    )

    assert isinstance(use_case, GetFinanceOverviewUseCase)
    assert use_case._summary_use_case._fallback_ratios is ratios


def test_build_transaction_use_case_applies_timezone() -> None:
    """The configured timezone should reach the ledger use case."""
    settings = FinanceSettings(timezone="Asia/Novosibirsk")

    use_case = container.build_transaction_breakdown_use_case(
        repository=MagicMock(),
        settings=settings,
    )

    assert isinstance(use_case, GetTransactionBreakdownUseCase)
    assert use_case._timezone == "Asia/Novosibirsk"
