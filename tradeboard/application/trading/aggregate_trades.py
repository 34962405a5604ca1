"""
Use case: Aggregate trades by period.

Input: AggregateTradesCommand (trades, granularity)
Output: list[AggregatedPeriod] sorted by period key
Side effects: None.
Failure cases: None. Unknown granularities bucket by day.
"""

import logging

from tradeboard.application.trading.dtos import AggregateTradesCommand, AggregatedPeriod
from tradeboard.domain.trading.aggregation import aggregate_trades, format_period_for_display

logger = logging.getLogger(__name__)


class AggregateTradesUseCase:
    """Runs the aggregation domain service and attaches display labels."""

    def execute(self, command: AggregateTradesCommand) -> list[AggregatedPeriod]:
        """Aggregate the command's trades.

        Args:
            command: Trades and the granularity to bucket them by.

        Returns:
            One labelled period per bucket, in period order.
        """
        buckets = aggregate_trades(command.trades, command.granularity)
        logger.info(
            "Aggregated %d trades into %d %s periods",
            len(command.trades),
            len(buckets),
            getattr(command.granularity, "value", command.granularity),
        )
        return [
            AggregatedPeriod(
                period=b.period,
                label=format_period_for_display(b.period, command.granularity),
                total_trade_size=b.total_trade_size,
                average_price=b.average_price,
                trade_count=b.trade_count,
                symbols=b.symbols,
            )
            for b in buckets
        ]
