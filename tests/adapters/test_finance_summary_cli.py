"""Tests for the finance_summary_cli adapter."""

from datetime import date
from decimal import Decimal

from src.adapters import finance_summary_cli
from src.domain.models import (
    CategoryShare,
    DateType,
    FinanceOverview,
    FinancialSummary,
    SummarySource,
)


class _Logger:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def warning(self, msg: str) -> None:
        self.messages.append(msg)

    def error(self, msg: str) -> None:
        self.messages.append(msg)

    def info(self, msg: str) -> None:
        self.messages.append(msg)


def _overview() -> FinanceOverview:
    return FinanceOverview(
        summary=FinancialSummary(
            sales=Decimal("200"),
            commissions=Decimal("10"),
            delivery=Decimal("16"),
            returns=Decimal("4"),
            ads=Decimal("6"),
            services=Decimal("10"),
            total_income=Decimal("200"),
            total_expenses=Decimal("46"),
            net_profit=Decimal("154"),
        ),
        categories=[
            CategoryShare(
                category="Продажи",
                amount=Decimal("200"),
                percentage=Decimal("81.3"),
                color="#10b981",
            )
        ],
        source=SummarySource.FALLBACK,
        warnings=("Region ignored",),
    )


def test_main_prints_overview(monkeypatch, capsys) -> None:
    """The CLI should build filters from env and print the overview."""
    captured = {}
    logger = _Logger()

    def _fake_query(filters):
        captured["filters"] = filters
        return _overview()

    monkeypatch.setenv("FINANCE_START_DATE", "2024-01-01")
    monkeypatch.setenv("FINANCE_END_DATE", "2024-01-31")
    monkeypatch.setenv("FINANCE_DATE_TYPE", "Shipment")
    monkeypatch.setenv("FINANCE_SKU", "123")
    monkeypatch.setenv("FINANCE_REGION", "Kazan")
    monkeypatch.setattr(finance_summary_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(
        finance_summary_cli,
        "query_finance_overview",
        _fake_query,
    )

    finance_summary_cli.main()

    filters = captured["filters"]
    assert filters.start_date == date(2024, 1, 1)
    assert filters.end_date == date(2024, 1, 31)
    assert filters.date_type is DateType.SHIPMENT
    assert filters.sku == 123
    assert filters.region == "Kazan"
    out = capsys.readouterr().out
    assert "source=fallback" in out
    assert "net_profit=154.00" in out
    assert "Продажи: 200.00 (81.3%)" in out
    assert "Warning: Region ignored" in out
    assert logger.messages == []


def test_main_warns_on_incomplete_range(monkeypatch, capsys) -> None:
    """Invalid dates should be reported and nothing printed."""
    logger = _Logger()
    monkeypatch.setenv("FINANCE_START_DATE", "01/01/2024")
    monkeypatch.delenv("FINANCE_END_DATE", raising=False)
    monkeypatch.setenv("FINANCE_SKU", "abc")
    monkeypatch.delenv("FINANCE_DATE_TYPE", raising=False)
    monkeypatch.delenv("FINANCE_REGION", raising=False)
    monkeypatch.setattr(finance_summary_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(
        finance_summary_cli,
        "query_finance_overview",
        lambda filters: None,
    )

    finance_summary_cli.main()

    assert capsys.readouterr().out == ""
    assert any("Invalid date" in msg for msg in logger.messages)
    assert any("Invalid SKU" in msg for msg in logger.messages)
    assert any("are required" in msg for msg in logger.messages)
