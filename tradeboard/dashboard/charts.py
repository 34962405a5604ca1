"""
Chart and table builders for the dashboard.

Turn aggregated periods, symbol shares and raw trades into plotly
figures and pandas frames. No Streamlit calls here so everything
can be tested without a browser session.
"""

import math
from typing import Sequence, TypeVar

import pandas as pd
import plotly.graph_objects as go

from tradeboard.application.trading.dtos import AggregatedPeriod
from tradeboard.domain.trading.entities import SymbolShare, TradeRecord

T = TypeVar("T")

BAR_COLOR = "#10B981"
CHART_TEMPLATE = "plotly_dark"
DEFAULT_PAGE_SIZE = 10


def build_bar_chart(periods: Sequence[AggregatedPeriod], height: int = 500) -> go.Figure:
    """Bar chart of total trade size per period."""
    fig = go.Figure(
        go.Bar(
            x=[p.label for p in periods],
            y=[p.total_trade_size for p in periods],
            marker_color=BAR_COLOR,
            customdata=[[p.trade_count, float(p.average_price)] for p in periods],
            hovertemplate=(
                "<b>%{x}</b><br>"
                "Trade size: %{y:,}<br>"
                "Trades: %{customdata[0]}<br>"
                "Avg price: $%{customdata[1]:.2f}"
                "<extra></extra>"
            ),
        )
    )
    fig.update_layout(
        template=CHART_TEMPLATE,
        height=height,
        xaxis_title="Period",
        yaxis_title="Trade Size",
        xaxis_tickangle=-45,
        margin=dict(t=20, r=30, b=60, l=80),
    )
    return fig


def build_treemap(shares: Sequence[SymbolShare], height: int = 500) -> go.Figure:
    """Tree-map of trade counts per symbol."""
    fig = go.Figure(
        go.Treemap(
            labels=[s.symbol for s in shares],
            parents=[""] * len(shares),
            values=[s.trade_count for s in shares],
            texttemplate="<b>%{label}</b><br>%{value} trades",
            hovertemplate="%{label}<br>Trades: %{value}<extra></extra>",
        )
    )
    fig.update_layout(
        template=CHART_TEMPLATE,
        height=height,
        margin=dict(t=10, r=10, b=10, l=10),
    )
    return fig


def page_count(total_items: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Number of pages needed to show total_items, at least one."""
    return max(1, math.ceil(total_items / page_size))


def paginate(items: Sequence[T], page: int, page_size: int = DEFAULT_PAGE_SIZE) -> list[T]:
    """Return the items of a 1-based page. Out-of-range pages are clamped."""
    page = min(max(page, 1), page_count(len(items), page_size))
    start = (page - 1) * page_size
    return list(items[start:start + page_size])


def trades_frame(trades: Sequence[TradeRecord]) -> pd.DataFrame:
    """Frame with the columns of the recent trades table."""
    return pd.DataFrame(
        [
            {
                "ID": t.id,
                "Date & Time": t.timestamp,
                "Symbol": t.symbol,
                "Trade Size": t.trade_size,
                "Price": float(t.price),
            }
            for t in trades
        ],
        columns=["ID", "Date & Time", "Symbol", "Trade Size", "Price"],
    )
