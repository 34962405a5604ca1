"""
Domain entities for the trading bounded context.

Entities represent trade records and the values derived from them.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class Granularity(str, Enum):
    """Aggregation interval used to bucket trades by period."""

    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"

    @property
    def nominal_days(self) -> int:
        """Approximate bucket width in days, used for UI labels only."""
        return _NOMINAL_DAYS[self]

    @classmethod
    def parse(cls, value: Union["Granularity", str, None]) -> Optional["Granularity"]:
        """Return the matching member, or None when the value is unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


_NOMINAL_DAYS = {
    Granularity.DAILY: 1,
    Granularity.WEEKLY: 7,
    Granularity.MONTHLY: 30,
    Granularity.QUARTERLY: 91,
}


@dataclass(frozen=True)
class TradeRecord:
    """A single executed stock trade."""

    id: Union[str, int]
    timestamp: datetime
    trade_size: int
    price: Decimal
    symbol: str


@dataclass(frozen=True)
class AggregatedBucket:
    """Summary statistics for all trades falling in one period.

    Attributes:
        period: Period key, lexicographically sortable in chronological order.
        total_trade_size: Sum of trade sizes in the period.
        average_price: Size-weighted average price, 0 when the total size is 0.
        trade_count: Number of trades in the period.
        symbols: Number of trades per ticker symbol.
    """

    period: str
    total_trade_size: int
    average_price: Decimal
    trade_count: int
    symbols: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class TradeSummary:
    """Headline metrics over a batch of raw trades."""

    total_trades: int
    total_trade_size: int
    average_price: Decimal
    unique_symbols: tuple[str, ...]
    start: Optional[datetime]
    end: Optional[datetime]


@dataclass(frozen=True)
class SymbolShare:
    """Trade count of one symbol across every aggregated period."""

    symbol: str
    trade_count: int
