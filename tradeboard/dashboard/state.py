"""
Dashboard view-model.

The only mutable state of the dashboard: trades loaded by the last
fetch, the loading flag, the last error and the parameters of the last
fetch. Stored once per browser session; the aggregation core never
sees it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from tradeboard.dashboard.filters import DashboardFilters
from tradeboard.domain.trading.entities import TradeRecord

NO_TRADES_MESSAGE = "No trades found for the specified criteria"


@dataclass(frozen=True)
class FetchParams:
    """Filter values that require a new request when they change."""

    start_timestamp: datetime
    min_size: int

    @classmethod
    def from_filters(cls, filters: DashboardFilters) -> "FetchParams":
        return cls(start_timestamp=filters.start_timestamp, min_size=filters.min_size)


@dataclass
class DashboardState:
    """Mutable per-session dashboard state."""

    trades: list[TradeRecord] = field(default_factory=list)
    error: Optional[str] = None
    is_loading: bool = False
    last_fetch: Optional[FetchParams] = None

    def needs_refetch(self, filters: DashboardFilters) -> bool:
        """True when the fetch filters differ from the last fetch.

        Granularity and chart changes only re-render the loaded trades.
        """
        return self.last_fetch != FetchParams.from_filters(filters)

    def begin_fetch(self) -> None:
        self.is_loading = True
        self.error = None

    def complete_fetch(self, filters: DashboardFilters, trades: list[TradeRecord]) -> None:
        """Store a successful fetch result. An empty result is reported as an error."""
        self.is_loading = False
        self.last_fetch = FetchParams.from_filters(filters)
        self.trades = list(trades)
        self.error = None if trades else NO_TRADES_MESSAGE

    def fail_fetch(self, filters: DashboardFilters, message: str) -> None:
        """Record a failed fetch, keeping previously loaded trades."""
        self.is_loading = False
        self.last_fetch = FetchParams.from_filters(filters)
        self.error = message

    @property
    def has_data(self) -> bool:
        """True when there are trades to render and no error to show."""
        return bool(self.trades) and self.error is None and not self.is_loading
