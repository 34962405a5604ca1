"""
Domain service: Trade aggregation by period.

Pure business logic for bucketing trades into Daily, Weekly, Monthly
or Quarterly periods and computing per-period statistics.
No framework imports. No IO. No side effects.

Period keys:
    - Daily:     YYYY-MM-DD
    - Weekly:    YYYY-W{n}-{month}  (week number restarts every month)
    - Monthly:   YYYY-MM
    - Quarterly: YYYY-Q{q}
"""

import math
from collections import defaultdict
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Union

from tradeboard.domain.trading.entities import AggregatedBucket, Granularity, TradeRecord

MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def aggregate_trades(
    trades: Iterable[TradeRecord],
    granularity: Union[Granularity, str],
) -> list[AggregatedBucket]:
    """Aggregate trades into per-period buckets.

    Args:
        trades: Trade records in any order. Not validated.
        granularity: Bucket width. Unknown values bucket by day.

    Returns:
        Buckets sorted ascending by period key. Empty for no trades.
    """
    trades = list(trades)
    if not trades:
        return []

    sorted_trades = sorted(trades, key=lambda t: t.timestamp)

    by_period: dict[str, list[TradeRecord]] = defaultdict(list)
    for trade in sorted_trades:
        by_period[period_key(trade.timestamp, granularity)].append(trade)

    buckets = [_summarize_bucket(period, group) for period, group in by_period.items()]
    return sorted(buckets, key=lambda b: b.period)


def period_key(timestamp: datetime, granularity: Union[Granularity, str]) -> str:
    """Return the period key of a timestamp for the given granularity.

    Calendar fields are read from the timestamp as given; no timezone
    conversion happens here.
    """
    year, month, day = timestamp.year, timestamp.month, timestamp.day
    resolved = Granularity.parse(granularity)

    if resolved is Granularity.WEEKLY:
        # Sunday=0 .. Saturday=6, as a calendar grid laid out from Sunday
        offset = (date(year, month, 1).weekday() + 1) % 7
        week = math.ceil((day + offset) / 7)
        return f"{year}-W{week}-{month}"

    if resolved is Granularity.MONTHLY:
        return f"{year}-{month:02d}"

    if resolved is Granularity.QUARTERLY:
        quarter = (month - 1) // 3 + 1
        return f"{year}-Q{quarter}"

    return f"{year}-{month:02d}-{day:02d}"


def format_period_for_display(key: str, granularity: Union[Granularity, str]) -> str:
    """Turn a period key produced by aggregate_trades into a readable label.

    Keys are assumed well-formed; malformed Weekly, Monthly or Quarterly
    keys raise ValueError or IndexError.

    Examples:
        >>> format_period_for_display("2024-03", Granularity.MONTHLY)
        'Mar 2024'
        >>> format_period_for_display("2024-Q1", "Quarterly")
        '2024 Q1'
    """
    resolved = Granularity.parse(granularity)

    if resolved is Granularity.WEEKLY:
        year, week_part, month = key.split("-")
        return f"{year} Week {week_part[1:]} (Month {month})"

    if resolved is Granularity.MONTHLY:
        year, month = key.split("-")
        return f"{MONTH_NAMES[int(month) - 1]} {year}"

    if resolved is Granularity.QUARTERLY:
        year, quarter = key.split("-")
        return f"{year} {quarter}"

    return key


def _summarize_bucket(period: str, trades: list[TradeRecord]) -> AggregatedBucket:
    """Compute the statistics of a single period."""
    total_size = sum(t.trade_size for t in trades)
    weighted_price_sum = sum(t.price * t.trade_size for t in trades)
    average_price = weighted_price_sum / total_size if total_size > 0 else Decimal("0")

    symbols: dict[str, int] = defaultdict(int)
    for trade in trades:
        symbols[trade.symbol] += 1

    return AggregatedBucket(
        period=period,
        total_trade_size=total_size,
        average_price=average_price,
        trade_count=len(trades),
        symbols=dict(symbols),
    )
