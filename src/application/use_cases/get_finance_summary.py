"""Use case to resolve the financial summary for a period."""

from dataclasses import dataclass
from datetime import date

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.constants import DEFAULT_FALLBACK_RATIOS, FallbackRatios
from src.domain.models import (
    DateType,
    FinancialSummary,
    SummaryResolution,
    SummarySource,
)
from src.domain.services import (
    estimate_summary_from_postings,
    summary_from_aggregate_row,
)
from src.infrastructure.logging.logger import get_app_logger


REGION_IGNORED_WARNING = (
    "Region filter is not supported by the postings estimate and was ignored."
)


@dataclass(frozen=True)
class PrimaryAttempt:
    """Outcome of the pre-computed summary lookup."""

    summary: FinancialSummary | None = None
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.summary is not None


class GetFinanceSummaryUseCase:
    """Resolve a financial summary, estimating it from postings if needed.

    The pre-computed aggregate is tried first. When it fails for any reason
    the summary is estimated from raw postings. Failures of the estimate
    are propagated to the caller.
    """

    def __init__(
        self,
        finance_repository: FinanceRepositoryPort,
        logger=None,
        fallback_ratios: FallbackRatios | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            finance_repository: Port providing marketplace finance data.
            logger: Optional logger compatible with logging.Logger-like API.
            fallback_ratios: Expense ratios used by the postings estimate.
        """
        self._finance_repository = finance_repository
        self._logger = logger or get_app_logger()
        self._fallback_ratios = fallback_ratios or DEFAULT_FALLBACK_RATIOS

    def execute(
        self,
        start_date: date,
        end_date: date,
        date_type: DateType = DateType.ORDER,
        sku: int | None = None,
        region: str | None = None,
    ) -> SummaryResolution:
        """Return the financial summary for the period.

        Args:
            start_date: Inclusive lower bound of the period.
            end_date: Inclusive upper bound of the period.
            date_type: Date field used by the pre-computed aggregate.
            sku: Optional product identifier filter.
            region: Optional region filter.

        Returns:
            SummaryResolution: Summary and the path that produced it.
        """
        attempt = self._attempt_primary(
            start_date,
            end_date,
            date_type,
            sku,
            region,
        )
        if attempt.succeeded:
            self._logger.info(
                f"Finance summary resolved from aggregate for "
                f"{start_date}..{end_date}"
            )
            return SummaryResolution(
                summary=attempt.summary,
                source=SummarySource.PRIMARY,
            )

        self._logger.warning(
            f"Finance summary aggregate failed, estimating from postings: "
            f"{attempt.error}"
        )
        return self._estimate_from_postings(start_date, end_date, sku, region)

    def _attempt_primary(
        self,
        start_date: date,
        end_date: date,
        date_type: DateType,
        sku: int | None,
        region: str | None,
    ) -> PrimaryAttempt:
        try:
            row = self._finance_repository.fetch_finance_summary(
                start_date,
                end_date,
                date_type,
                sku=sku,
                region=region,
            )
            return PrimaryAttempt(summary=summary_from_aggregate_row(row))
        except Exception as exc:  # noqa: BLE001
            return PrimaryAttempt(error=exc)

    def _estimate_from_postings(
        self,
        start_date: date,
        end_date: date,
        sku: int | None,
        region: str | None,
    ) -> SummaryResolution:
        warnings: tuple[str, ...] = ()
        if region:
            self._logger.warning(
                f"Region filter '{region}' ignored by the postings estimate"
            )
            warnings = (REGION_IGNORED_WARNING,)

        try:
            postings = self._finance_repository.fetch_postings(
                start_date,
                end_date,
                sku=sku,
            )
        except Exception as exc:
            self._logger.error(
                f"Failed to load finance data from both the aggregate and "
                f"postings: {exc}"
            )
            raise

        summary = estimate_summary_from_postings(
            postings,
            self._fallback_ratios,
        )
        self._logger.info(
            f"Finance summary estimated from {len(postings)} postings: "
            f"income={summary.total_income}, "
            f"expenses={summary.total_expenses}"
        )
        return SummaryResolution(
            summary=summary,
            source=SummarySource.FALLBACK,
            warnings=warnings,
        )


__all__ = [
    "GetFinanceSummaryUseCase",
    "PrimaryAttempt",
    "REGION_IGNORED_WARNING",
]
