"""
Data Transfer Objects for the trading application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Union

from tradeboard.domain.trading.entities import (
    Granularity,
    SymbolShare,
    TradeRecord,
    TradeSummary,
)


@dataclass(frozen=True)
class GetTradesQuery:
    """Input DTO for querying trades held by the backend.

    Attributes:
        start_timestamp: Earliest trade timestamp to include.
        min_quote_size: Minimum trade size to include.
    """

    start_timestamp: datetime
    min_quote_size: Decimal = Decimal("0")


@dataclass(frozen=True)
class AggregateTradesCommand:
    """Input DTO for aggregating trades by period.

    Attributes:
        trades: Trades to aggregate, in any order.
        granularity: Bucket width. Unknown values bucket by day.
    """

    trades: tuple[TradeRecord, ...]
    granularity: Union[Granularity, str]


@dataclass(frozen=True)
class AggregatedPeriod:
    """Output DTO for one aggregated period.

    Attributes:
        period: Sortable period key.
        label: Human-readable period label.
        total_trade_size: Sum of trade sizes.
        average_price: Size-weighted average price.
        trade_count: Number of trades.
        symbols: Number of trades per symbol.
    """

    period: str
    label: str
    total_trade_size: int
    average_price: Decimal
    trade_count: int
    symbols: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class DashboardSnapshot:
    """Output DTO with everything the dashboard renders for one view.

    Attributes:
        granularity: Granularity the periods were built with.
        summary: Headline metrics over the raw trades.
        periods: Aggregated periods, in period order.
        symbol_shares: Trade counts per symbol across all periods.
    """

    granularity: Union[Granularity, str]
    summary: TradeSummary
    periods: list[AggregatedPeriod]
    symbol_shares: list[SymbolShare]
