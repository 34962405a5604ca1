"""
Use case: Load and rebuild the dashboard view.

Input: filter values (start timestamp, minimum size) for fetching,
       trades plus a granularity for rebuilding the view
Output: list[TradeRecord] for fetch, DashboardSnapshot for build_snapshot
Side effects: One HTTP request per fetch, through the TradeSourcePort.
Failure cases: TradeSourceUnavailableError, MalformedTradeRecordError.

Fetching and rendering are separate steps so that switching granularity
or chart type re-aggregates the trades already loaded without another
request.
"""

import logging
from datetime import datetime
from typing import Iterable, Union

from tradeboard.application.trading.aggregate_trades import AggregateTradesUseCase
from tradeboard.application.trading.dtos import AggregateTradesCommand, DashboardSnapshot
from tradeboard.domain.trading.entities import Granularity, TradeRecord
from tradeboard.domain.trading.ports import TradeSourcePort
from tradeboard.domain.trading.summary import summarize_trades, symbol_shares

logger = logging.getLogger(__name__)


class LoadDashboardUseCase:
    """Orchestrates the dashboard's fetch and render steps."""

    def __init__(
        self,
        trade_source: TradeSourcePort,
        aggregate_use_case: AggregateTradesUseCase | None = None,
    ) -> None:
        self._trade_source = trade_source
        self._aggregate = aggregate_use_case or AggregateTradesUseCase()

    def fetch(self, start_timestamp: datetime, min_size: int) -> list[TradeRecord]:
        """Fetch trades from the source. Errors propagate to the caller."""
        logger.info(
            "Fetching trades with parameters start=%s, min_size=%d",
            start_timestamp.isoformat(),
            min_size,
        )
        return self._trade_source.fetch_trades(start_timestamp, min_size)

    def build_snapshot(
        self,
        trades: Iterable[TradeRecord],
        granularity: Union[Granularity, str],
    ) -> DashboardSnapshot:
        """Build the summary, periods and symbol shares for loaded trades."""
        trades = tuple(trades)
        periods = self._aggregate.execute(
            AggregateTradesCommand(trades=trades, granularity=granularity)
        )
        return DashboardSnapshot(
            granularity=granularity,
            summary=summarize_trades(trades),
            periods=periods,
            symbol_shares=symbol_shares(periods),
        )
