"""
TradeBoard — Streamlit Dashboard
Trade analytics over the mock trades backend.

Connects to the FastAPI backend at {TRADES_API_URL}/trades
"""

import logging
from datetime import date

import requests
import streamlit as st

from tradeboard.application.trading.load_dashboard import LoadDashboardUseCase
from tradeboard.core.config import settings
from tradeboard.dashboard.charts import (
    DEFAULT_PAGE_SIZE,
    build_bar_chart,
    build_treemap,
    page_count,
    paginate,
    trades_frame,
)
from tradeboard.dashboard.filters import (
    MIN_SIZE_PRESETS,
    TIME_RANGE_HINTS,
    ChartType,
    DashboardFilters,
    TimeRange,
    format_min_size,
    parse_min_size,
    resolve_start_timestamp,
)
from tradeboard.dashboard.state import DashboardState
from tradeboard.domain.trading.entities import Granularity
from tradeboard.domain.trading.errors import InvalidFilterError, TradingDomainError
from tradeboard.infrastructure.trading.trades_api_client import TradesApiClient
from tradeboard.shared.logging import configure_logging

logger = logging.getLogger("tradeboard.dashboard")

# ── Configuration ─────────────────────────────────────────────────────
API_BASE = settings.trades_api_url

st.set_page_config(
    page_title="TradeBoard — Trade Analytics",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ── Custom CSS ────────────────────────────────────────────────────────
st.markdown("""
<style>
    .block-container { padding-top: 1rem; }

    /* Metric cards */
    div[data-testid="stMetric"] {
        background: linear-gradient(135deg, #1e293b 0%, #0f172a 100%);
        border: 1px solid #334155;
        border-radius: 12px;
        padding: 16px 20px;
        box-shadow: 0 4px 6px -1px rgba(0,0,0,0.3);
    }
    div[data-testid="stMetric"] label {
        color: #94a3b8 !important;
        font-size: 0.85rem !important;
    }
    div[data-testid="stMetric"] [data-testid="stMetricValue"] {
        color: #f1f5f9 !important;
        font-weight: 700 !important;
    }
</style>
""", unsafe_allow_html=True)


# ── Helpers ───────────────────────────────────────────────────────────

@st.cache_resource
def get_use_case() -> LoadDashboardUseCase:
    """One use case (and HTTP session) per Streamlit server process."""
    configure_logging(level=settings.log_level)
    client = TradesApiClient(API_BASE, timeout=settings.request_timeout_seconds)
    return LoadDashboardUseCase(trade_source=client)


def api_health():
    """Return the backend health payload, or None when it is unreachable."""
    try:
        r = requests.get(f"{API_BASE}/health", timeout=5)
        r.raise_for_status()
        return r.json()
    except requests.exceptions.RequestException:
        return None


def get_state() -> DashboardState:
    """Per-session view-model, created on first use."""
    if "dashboard" not in st.session_state:
        st.session_state["dashboard"] = DashboardState()
    return st.session_state["dashboard"]


state = get_state()
use_case = get_use_case()


# ══════════════════════════════════════════════════════════════════════
# SIDEBAR
# ══════════════════════════════════════════════════════════════════════

with st.sidebar:
    st.title("TradeBoard")
    st.caption("Trade Analytics Dashboard")
    st.divider()

    st.subheader("Time Range")
    time_range = st.radio(
        "Time range",
        [r.value for r in TimeRange],
        index=[r.value for r in TimeRange].index(TimeRange.ONE_YEAR.value),
        horizontal=True,
        label_visibility="collapsed",
    )
    st.caption(TIME_RANGE_HINTS[TimeRange(time_range)])
    custom_date = None
    if time_range == TimeRange.CUSTOM.value:
        custom_date = st.date_input("Start date", value=None, max_value=date.today())

    st.subheader("Minimum Trade Size")
    preset = st.selectbox(
        "Preset",
        MIN_SIZE_PRESETS,
        format_func=format_min_size,
    )
    min_size_text = st.text_input("Shares", value=str(preset))

    st.subheader("View")
    granularity = st.selectbox(
        "Aggregation",
        list(Granularity),
        format_func=lambda g: f"{g.value} ({g.nominal_days} Day{'s' if g.nominal_days > 1 else ''})",
    )
    chart = st.radio(
        "Chart",
        list(ChartType),
        format_func=lambda c: "Bar Chart" if c is ChartType.BAR_CHART else "Tree Map",
        horizontal=True,
    )

    filters = None
    try:
        filters = DashboardFilters(
            start_timestamp=resolve_start_timestamp(time_range, date.today(), custom_date),
            min_size=parse_min_size(min_size_text),
            granularity=granularity,
            chart=chart,
        )
    except InvalidFilterError as e:
        st.error(f"⚠️ {e.message}")

    fetch_clicked = st.button(
        "Fetch Trades", type="primary", disabled=filters is None, use_container_width=True
    )
    if filters is not None and state.last_fetch is not None and state.needs_refetch(filters):
        st.info("Filters changed. Fetch again to refresh the data.")

    st.divider()
    health = api_health()
    if health is None:
        st.warning("Backend offline")
    else:
        st.success(f"✅ API Online — v{health.get('version', '?')}")


# ══════════════════════════════════════════════════════════════════════
# FETCH
# ══════════════════════════════════════════════════════════════════════

if fetch_clicked and filters is not None:
    state.begin_fetch()
    with st.spinner("Loading data..."):
        try:
            trades = use_case.fetch(filters.start_timestamp, filters.min_size)
        except TradingDomainError as e:
            logger.error("Failed to fetch trades: %s", e.message)
            state.fail_fetch(filters, f"Failed to fetch trades: {e.message}")
        else:
            state.complete_fetch(filters, trades)


# ══════════════════════════════════════════════════════════════════════
# PAGE: Dashboard
# ══════════════════════════════════════════════════════════════════════

snapshot = use_case.build_snapshot(state.trades, granularity)
summary = snapshot.summary

head_left, head_right = st.columns([3, 1])
with head_left:
    st.title("📈 Trade Analytics Dashboard")
with head_right:
    if summary.start is not None:
        st.caption(f"{summary.start:%Y-%m-%d} – {summary.end:%Y-%m-%d}")
    else:
        st.caption("No date range available")

c1, c2, c3, c4 = st.columns(4)
c1.metric("Total Trades", f"{summary.total_trades:,}", f"across {len(summary.unique_symbols)} symbols", delta_color="off")
c2.metric("Total Trade Size", f"{summary.total_trade_size:,}", "volume", delta_color="off")
c3.metric("Average Price", f"${summary.average_price:,.2f}", "per trade", delta_color="off")
c4.metric("Aggregation", granularity.value, f"{len(snapshot.periods)} periods", delta_color="off")

st.divider()

if state.error:
    st.error(f"⚠️ {state.error}")

if state.has_data:
    if chart is ChartType.BAR_CHART:
        st.plotly_chart(build_bar_chart(snapshot.periods), use_container_width=True)
    else:
        st.plotly_chart(build_treemap(snapshot.symbol_shares), use_container_width=True)

    st.subheader("Recent Trades")
    pages = page_count(len(state.trades), DEFAULT_PAGE_SIZE)
    page = st.number_input("Page", min_value=1, max_value=pages, value=1, step=1)
    visible = paginate(state.trades, int(page), DEFAULT_PAGE_SIZE)
    st.caption(f"Showing {len(visible)} of {len(state.trades):,} — page {int(page)} of {pages}")
    st.dataframe(
        trades_frame(visible),
        use_container_width=True,
        hide_index=True,
        column_config={
            "Date & Time": st.column_config.DatetimeColumn(format="YYYY-MM-DD HH:mm:ss"),
            "Trade Size": st.column_config.NumberColumn(format="%d"),
            "Price": st.column_config.NumberColumn(format="$%.2f"),
        },
    )
elif not state.error:
    st.info("No trade data available. Use the controls in the sidebar to fetch trade data.")
