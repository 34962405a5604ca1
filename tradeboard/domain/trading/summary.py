"""
Domain service: Dashboard summary metrics.

Headline numbers shown above the charts and the per-symbol totals
behind the tree-map. Pure functions over trades and buckets.
"""

from collections import Counter
from decimal import Decimal
from typing import Iterable

from tradeboard.domain.trading.entities import (
    SymbolShare,
    TradeRecord,
    TradeSummary,
)


def summarize_trades(trades: Iterable[TradeRecord]) -> TradeSummary:
    """Compute headline metrics over raw trades.

    The average price here is a plain per-trade mean, unlike the
    size-weighted average of an aggregated bucket.
    """
    trades = list(trades)
    if not trades:
        return TradeSummary(
            total_trades=0,
            total_trade_size=0,
            average_price=Decimal("0"),
            unique_symbols=(),
            start=None,
            end=None,
        )

    timestamps = [t.timestamp for t in trades]
    return TradeSummary(
        total_trades=len(trades),
        total_trade_size=sum(t.trade_size for t in trades),
        average_price=sum(t.price for t in trades) / len(trades),
        unique_symbols=tuple(sorted({t.symbol for t in trades})),
        start=min(timestamps),
        end=max(timestamps),
    )


def symbol_shares(buckets: Iterable) -> list[SymbolShare]:
    """Merge the `symbols` counts of aggregated periods, largest first.

    Ties are ordered by symbol. Accepts AggregatedBucket or any object
    with a `symbols` mapping.
    """
    totals: Counter[str] = Counter()
    for bucket in buckets:
        totals.update(bucket.symbols)

    return [
        SymbolShare(symbol=symbol, trade_count=count)
        for symbol, count in sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    ]
