"""Use case to build the finance overview shown on the dashboard."""

from datetime import date

from src.application.use_cases.get_finance_summary import (
    GetFinanceSummaryUseCase,
)
from src.domain.models import DateType, FinanceOverview
from src.domain.services import build_category_breakdown


class GetFinanceOverviewUseCase:
    """Combine the resolved summary with its category breakdown."""

    def __init__(self, summary_use_case: GetFinanceSummaryUseCase) -> None:
        self._summary_use_case = summary_use_case

    def execute(
        self,
        start_date: date,
        end_date: date,
        date_type: DateType = DateType.ORDER,
        sku: int | None = None,
        region: str | None = None,
    ) -> FinanceOverview:
        """Return the summary and chart-ready categories for the period."""
        resolution = self._summary_use_case.execute(
            start_date,
            end_date,
            date_type=date_type,
            sku=sku,
            region=region,
        )
        return FinanceOverview(
            summary=resolution.summary,
            categories=build_category_breakdown(resolution.summary),
            source=resolution.source,
            warnings=resolution.warnings,
        )


__all__ = ["GetFinanceOverviewUseCase", "FinanceOverview"]
