"""Tests for the finance summary domain services."""

from decimal import Decimal

from src.domain.constants import FallbackRatios
from src.domain.models import FinanceSummaryRow, PostingRow
from src.domain.services import (
    estimate_summary_from_postings,
    summary_from_aggregate_row,
    zero_summary,
)


def _aggregate_row(**overrides) -> FinanceSummaryRow:
    values = {
        "total_sales": Decimal("1000"),
        "total_commissions": Decimal("-150"),
        "total_delivery": Decimal("-80"),
        "total_returns": Decimal("-20"),
        "total_ads": Decimal("-30"),
        "total_services": Decimal("-50"),
        "total_income": Decimal("1000"),
        "total_expenses": Decimal("330"),
        "net_profit": Decimal("670"),
    }
    values.update(overrides)
    return FinanceSummaryRow(**values)


def test_estimate_matches_reference_posting() -> None:
    """A single posting should yield the documented estimate."""
    postings = [
        PostingRow(
            price=Decimal("100"),
            quantity=Decimal("2"),
            commission_amount=Decimal("-10"),
        )
    ]

    summary = estimate_summary_from_postings(postings)

    assert summary.sales == Decimal("200")
    assert summary.commissions == Decimal("10")
    assert summary.delivery == Decimal("16")
    assert summary.returns == Decimal("4")
    assert summary.ads == Decimal("6")
    assert summary.services == Decimal("10")
    assert summary.total_income == Decimal("200")
    assert summary.total_expenses == Decimal("46")
    assert summary.net_profit == Decimal("154")


def test_estimate_keeps_net_profit_consistent() -> None:
    """Net profit should always be income minus expenses."""
    postings = [
        PostingRow(Decimal("19.99"), Decimal("3"), Decimal("4.5")),
        PostingRow(Decimal("250"), Decimal("1"), Decimal("-37.25")),
        PostingRow(Decimal("7.10"), Decimal("12"), Decimal("0")),
    ]

    summary = estimate_summary_from_postings(postings)

    assert summary.net_profit == summary.total_income - summary.total_expenses
    assert summary.commissions == Decimal("41.75")


def test_estimate_treats_dirty_values_as_zero() -> None:
    """Non-numeric fields should not abort the aggregation."""
    postings = [
        PostingRow(price="abc", quantity=Decimal("2"), commission_amount=None),
        PostingRow(
            price=Decimal("50"),
            quantity=None,
            commission_amount="-5",
        ),
        PostingRow(
            price=Decimal("10"),
            quantity=Decimal("1"),
            commission_amount="NaN",
        ),
    ]

    summary = estimate_summary_from_postings(postings)

    assert summary.sales == Decimal("10")
    assert summary.commissions == Decimal("5")


def test_estimate_treats_out_of_range_values_as_zero() -> None:
    """Values beyond the Decimal context should not overflow the sums."""
    postings = [
        PostingRow(
            price="1e1000000",
            quantity=Decimal("1"),
            commission_amount=Decimal("0"),
        ),
        PostingRow(Decimal("100"), Decimal("2"), Decimal("-10")),
    ]

    summary = estimate_summary_from_postings(postings)

    assert summary.sales == Decimal("200")
    assert summary.commissions == Decimal("10")
    assert summary.net_profit == Decimal("154")


def test_estimate_uses_configured_ratios() -> None:
    """Custom ratios should replace the default placeholders."""
    ratios = FallbackRatios(
        delivery=Decimal("0.1"),
        returns=Decimal("0"),
        ads=Decimal("0"),
        services=Decimal("0"),
    )
    postings = [PostingRow(Decimal("100"), Decimal("1"), Decimal("0"))]

    summary = estimate_summary_from_postings(postings, ratios)

    assert summary.delivery == Decimal("10")
    assert summary.returns == Decimal("0")
    assert summary.total_expenses == Decimal("10")
    assert summary.net_profit == Decimal("90")


def test_estimate_without_postings_is_zero() -> None:
    """An empty period should produce a zero summary."""
    assert estimate_summary_from_postings([]) == zero_summary()


def test_aggregate_row_maps_fields_verbatim() -> None:
    """Aggregate totals should be taken as provided."""
    summary = summary_from_aggregate_row(_aggregate_row())

    assert summary.sales == Decimal("1000")
    assert summary.commissions == Decimal("-150")
    assert summary.total_expenses == Decimal("330")
    assert summary.net_profit == Decimal("670")


def test_aggregate_row_null_commission_becomes_zero() -> None:
    """A null commission should be coerced to zero."""
    summary = summary_from_aggregate_row(
        _aggregate_row(total_commissions=None)
    )

    assert summary.commissions == Decimal("0")
    assert summary.commissions.is_finite()


def test_missing_aggregate_row_yields_zero_summary() -> None:
    """No aggregate row should be treated as all zeros."""
    assert summary_from_aggregate_row(None) == zero_summary()
