"""Use case to break recent ledger entries down for the detail view."""

from collections.abc import Callable
from datetime import date, datetime
from zoneinfo import ZoneInfo

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.constants import DEFAULT_TIMEZONE, LEDGER_ENTRY_LIMIT
from src.domain.models import TransactionBreakdownRow
from src.domain.services import map_ledger_entry
from src.infrastructure.logging.logger import get_app_logger


class GetTransactionBreakdownUseCase:
    """Map the most recent ledger entries into simplified breakdown rows."""

    def __init__(
        self,
        finance_repository: FinanceRepositoryPort,
        logger=None,
        timezone: str = DEFAULT_TIMEZONE,
        today_provider: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            finance_repository: Port providing marketplace finance data.
            logger: Optional logger compatible with logging.Logger-like API.
            timezone: IANA timezone used to date undated entries.
            today_provider: Optional clock override returning today's date.
        """
        self._finance_repository = finance_repository
        self._logger = logger or get_app_logger()
        self._timezone = timezone
        self._today_provider = today_provider or self._today

    def execute(
        self,
        start_date: date,
        end_date: date,
    ) -> list[TransactionBreakdownRow]:
        """Return breakdown rows for the latest entries of the period.

        Args:
            start_date: Inclusive lower bound on the operation date.
            end_date: Inclusive upper bound on the operation date.

        Returns:
            list[TransactionBreakdownRow]: Rows ordered newest first.
        """
        entries = self._finance_repository.fetch_ledger_entries(
            start_date,
            end_date,
            limit=LEDGER_ENTRY_LIMIT,
        )
        fetched_on = self._today_provider()
        self._logger.info(
            f"Fetched {len(entries)} ledger entries for "
            f"{start_date}..{end_date}"
        )
        return [map_ledger_entry(entry, fetched_on) for entry in entries]

    def _today(self) -> date:
        return datetime.now(ZoneInfo(self._timezone)).date()


__all__ = ["GetTransactionBreakdownUseCase", "TransactionBreakdownRow"]
