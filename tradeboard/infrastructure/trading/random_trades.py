"""
Adapter: Random trades repository.

Implements TradesQueryable port.
Generates a seeded, in-memory set of stock trades for the mock backend.
Nothing is persisted; the set is rebuilt on every process start.
"""

import logging
from datetime import datetime, time, timedelta, timezone
from decimal import Decimal
from typing import Optional

import numpy as np

from tradeboard.domain.trading.entities import TradeRecord
from tradeboard.domain.trading.ports import TradesQueryable

logger = logging.getLogger(__name__)

SYMBOLS = ("AAPL", "MSFT", "GOOGL", "AMZN", "META")
SYMBOL_WEIGHTS = (0.30, 0.25, 0.20, 0.15, 0.10)
BASE_PRICES = {
    "AAPL": 175.0,
    "MSFT": 350.0,
    "GOOGL": 130.0,
    "AMZN": 130.0,
    "META": 300.0,
}

MARKET_OPEN = time(9, 30)
MARKET_CLOSE = time(16, 0)
PRICE_VARIATION = 0.05
MAX_TRADE_SIZE = 1000


class RandomTradesRepository(TradesQueryable):
    """Seeded generator of plausible stock trades.

    Trades fall inside 09:30-16:00 of a random day in the history
    window, more liquid symbols trade more often, prices stay within
    5% of a base price and sizes follow a capped power law.
    """

    def __init__(
        self,
        seed: int = 42,
        trade_count: int = 5000,
        history_days: int = 365,
        now: Optional[datetime] = None,
    ) -> None:
        """Initialize the generator.

        Args:
            seed: Seed of the random generator. Same seed, same trades.
            trade_count: Number of trades to generate.
            history_days: Length of the history window ending at `now`.
            now: End of the history window. Defaults to the current UTC time.
        """
        self._seed = seed
        self._trade_count = trade_count
        self._history_days = history_days
        self._now = now
        self._trades: Optional[list[TradeRecord]] = None

    def initialize(self) -> None:
        """Generate the trade set, replacing any previous one."""
        rng = np.random.default_rng(self._seed)
        end = self._now or datetime.now(timezone.utc)
        if end.tzinfo is None:
            end = end.replace(tzinfo=timezone.utc)
        start = end - timedelta(days=self._history_days)
        n = self._trade_count

        day_offsets = rng.random(n) * (end - start).total_seconds()
        session_fractions = rng.random(n)
        symbol_indexes = rng.choice(len(SYMBOLS), size=n, p=SYMBOL_WEIGHTS)
        variations = rng.random(n) * 2 - 1
        # 1 - u keeps the base strictly positive for the negative power
        sizes = np.minimum(
            ((1.0 - rng.random(n)) ** -0.5 * 100).astype(int), MAX_TRADE_SIZE
        )

        session = _session_length()
        trades = []
        for i in range(n):
            day = (start + timedelta(seconds=float(day_offsets[i]))).date()
            timestamp = datetime.combine(day, MARKET_OPEN, tzinfo=start.tzinfo) + (
                session * float(session_fractions[i])
            )
            symbol = SYMBOLS[int(symbol_indexes[i])]
            base_price = BASE_PRICES[symbol]
            price = base_price + base_price * PRICE_VARIATION * float(variations[i])

            trades.append(
                TradeRecord(
                    id=i + 1,
                    timestamp=timestamp,
                    trade_size=int(sizes[i]),
                    price=Decimal(f"{price:.2f}"),
                    symbol=symbol,
                )
            )

        trades.sort(key=lambda t: t.timestamp)
        self._trades = trades
        logger.info(
            "Generated %d mock trades between %s and %s (seed=%d)",
            n,
            start.date(),
            end.date(),
            self._seed,
        )

    def query_trades(
        self, start_timestamp: datetime, min_quote_size: Decimal
    ) -> list[TradeRecord]:
        """Return generated trades matching the filter.

        Args:
            start_timestamp: Earliest timestamp to include (inclusive).
            min_quote_size: Minimum trade size to include (inclusive).

        Returns:
            Matching trades ordered by timestamp ascending.
        """
        if self._trades is None:
            self.initialize()

        if start_timestamp.tzinfo is None:
            start_timestamp = start_timestamp.replace(tzinfo=timezone.utc)

        return [
            t
            for t in self._trades
            if t.timestamp >= start_timestamp and t.trade_size >= min_quote_size
        ]


def _session_length() -> timedelta:
    """Length of the regular trading session."""
    return datetime.combine(datetime.min, MARKET_CLOSE) - datetime.combine(
        datetime.min, MARKET_OPEN
    )
