"""Streamlit finance dashboard entry point."""

from collections.abc import Sequence
from datetime import date, datetime, timedelta
from decimal import Decimal
from zoneinfo import ZoneInfo

import streamlit as st
import altair as alt

from src.adapters.finance_queries import (
    query_finance_overview,
    query_transaction_breakdown,
)
from src.domain.models import (
    CategoryShare,
    DateType,
    FinanceFilters,
    FinanceOverview,
    SummarySource,
    TransactionBreakdownRow,
)
from src.infrastructure.settings import FinanceSettings


def _fetch_finance_overview(filters: FinanceFilters) -> FinanceOverview | None:
    """Fetch the finance overview for the active filters."""
    return query_finance_overview(filters)


@st.cache_data(show_spinner=False)
def _load_finance_overview(filters: FinanceFilters) -> FinanceOverview | None:
    """Cached wrapper around _fetch_finance_overview."""
    return _fetch_finance_overview(filters)


def _fetch_transaction_breakdown(
    filters: FinanceFilters,
) -> list[TransactionBreakdownRow] | None:
    """Fetch the ledger breakdown rows for the active filters."""
    return query_transaction_breakdown(filters)


@st.cache_data(show_spinner=False)
def _load_transaction_breakdown(
    filters: FinanceFilters,
) -> list[TransactionBreakdownRow] | None:
    """Cached wrapper around _fetch_transaction_breakdown."""
    return _fetch_transaction_breakdown(filters)


def _format_currency(value: Decimal) -> str:
    """Format rouble amounts for display."""
    return f"{value:,.2f} ₽"


def _prepare_donut_chart_data(
    categories: Sequence[CategoryShare],
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready rows from category shares.

    Args:
        categories: Category shares sorted by amount.

    Returns:
        list[dict[str, str | float]]: One row per category.
    """
    return [
        {
            "category": share.category,
            "amount": float(share.amount),
            "color": share.color,
            "amount_label": _format_currency(share.amount),
            "share_label": f"{share.percentage:.1f}%",
        }
        for share in categories
    ]


def _prepare_transaction_table(
    rows: Sequence[TransactionBreakdownRow],
) -> list[dict[str, str]]:
    """Prepare table rows for the ledger breakdown."""
    return [
        {
            "Date": row.date.isoformat(),
            "Posting": row.posting_number,
            "Operation": row.operation_type,
            "Sales": _format_currency(row.sales),
            "Commissions": _format_currency(row.commissions),
            "Net profit": _format_currency(row.net_profit),
        }
        for row in rows
    ]


def _render_category_chart(
    categories: Sequence[CategoryShare],
    chart_size: int = 360,
) -> None:
    """Render a donut chart of category amounts."""
    if not categories:
        st.info("No finance amounts available for the chart.")
        return
    data = _prepare_donut_chart_data(categories)
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                domain=[row["category"] for row in data],
                range=[row["color"] for row in data],
            ),
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(
        width=chart_size,
        height=chart_size,
    )
    st.subheader("Structure")
    st.altair_chart(chart, width="stretch")


def _render_summary(overview: FinanceOverview) -> None:
    """Render headline metrics and resolution notices."""
    summary = overview.summary
    income_col, expenses_col, profit_col = st.columns(3)
    income_col.metric("Income", _format_currency(summary.total_income))
    expenses_col.metric("Expenses", _format_currency(summary.total_expenses))
    profit_col.metric("Net profit", _format_currency(summary.net_profit))
    if overview.source is SummarySource.FALLBACK:
        st.caption(
            "Estimated from order postings: delivery, returns, ads and "
            "services are approximated from sales."
        )
    for warning in overview.warnings:
        st.warning(warning)


def _today() -> date:
    """Return today's date in the configured finance timezone."""
    timezone = FinanceSettings.from_env().timezone
    return datetime.now(ZoneInfo(timezone)).date()


def _parse_sku(raw: str) -> int | None:
    """Parse the SKU text input, ignoring anything that is not an integer."""
    raw = raw.strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _read_filters(today: date) -> FinanceFilters:
    """Read the active filters from the sidebar."""
    selected = st.sidebar.date_input(
        "Period",
        value=(today - timedelta(days=30), today),
    )
    start_date, end_date = None, None
    if isinstance(selected, (tuple, list)):
        if len(selected) > 0:
            start_date = selected[0]
        if len(selected) > 1:
            end_date = selected[1]
    date_type = st.sidebar.selectbox(
        "Date type",
        options=[item.value for item in DateType],
        index=0,
    )
    raw_sku = st.sidebar.text_input("SKU", placeholder="All products")
    region = st.sidebar.text_input("Region", placeholder="All regions")
    sku = _parse_sku(raw_sku)
    return FinanceFilters(
        start_date=start_date,
        end_date=end_date,
        date_type=DateType(date_type),
        sku=sku,
        region=region.strip() or None,
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Dashboard", layout="wide")
    st.title("Finance")

    filters = _read_filters(_today())
    overview = _load_finance_overview(filters)
    if overview is None:
        st.info("Select a start and end date to load finance data.")
        return

    _render_summary(overview)
    _render_category_chart(overview.categories)

    rows = _load_transaction_breakdown(filters) or []
    st.subheader("Transactions")
    st.caption(f"{len(rows)} latest ledger entries")
    st.dataframe(
        _prepare_transaction_table(rows),
        width="stretch",
        hide_index=True,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
