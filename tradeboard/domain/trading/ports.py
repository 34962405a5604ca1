"""
Port interfaces (ABCs) for the trading bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal

from tradeboard.domain.trading.entities import TradeRecord


class TradesQueryable(ABC):
    """Port for querying the trades held by the backend."""

    @abstractmethod
    def query_trades(
        self, start_timestamp: datetime, min_quote_size: Decimal
    ) -> list[TradeRecord]:
        """Return trades at or after start_timestamp with size >= min_quote_size.

        Args:
            start_timestamp: Earliest trade timestamp to include.
            min_quote_size: Minimum trade size to include.

        Returns:
            Matching trades ordered by timestamp ascending.
        """
        raise NotImplementedError


class TradeSourcePort(ABC):
    """Port for fetching trades from a remote trade data source.

    Used by the dashboard. Transport failures surface as
    TradeSourceUnavailableError; malformed payloads as
    MalformedTradeRecordError.
    """

    @abstractmethod
    def fetch_trades(
        self, start_timestamp: datetime, min_quote_size: int
    ) -> list[TradeRecord]:
        """Fetch trades matching the given filter from the source."""
        raise NotImplementedError
