"""
Use case: Query trades held by the backend.

Input: GetTradesQuery (start_timestamp, min_quote_size)
Output: list[TradeRecord] ordered by timestamp
Side effects: None.
Failure cases: None beyond adapter errors.
"""

import logging

from tradeboard.application.trading.dtos import GetTradesQuery
from tradeboard.domain.trading.entities import TradeRecord
from tradeboard.domain.trading.ports import TradesQueryable

logger = logging.getLogger(__name__)


class GetTradesUseCase:
    """Orchestrates trade retrieval for the trades endpoint."""

    def __init__(self, trades_port: TradesQueryable) -> None:
        self._trades_port = trades_port

    def execute(self, query: GetTradesQuery) -> list[TradeRecord]:
        """Run the trade query.

        Args:
            query: Start timestamp and minimum trade size filter.

        Returns:
            Matching trades ordered by timestamp ascending.
        """
        logger.info(
            "Querying trades with start=%s, min_quote_size=%s",
            query.start_timestamp.isoformat(),
            query.min_quote_size,
        )
        trades = self._trades_port.query_trades(
            start_timestamp=query.start_timestamp,
            min_quote_size=query.min_quote_size,
        )
        logger.debug("Query matched %d trades", len(trades))
        return trades
