"""
Tests for the trade aggregation domain service.

Tests period keys, per-period statistics and display labels in isolation.
No IO or infrastructure required.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from tradeboard.domain.trading.aggregation import (
    aggregate_trades,
    format_period_for_display,
    period_key,
)
from tradeboard.domain.trading.entities import Granularity, TradeRecord
from tradeboard.infrastructure.trading.random_trades import RandomTradesRepository

ALL_GRANULARITIES = list(Granularity)


def _trade(
    day: str,
    size: int = 100,
    price: str = "10.00",
    symbol: str = "AAPL",
    trade_id: int = 1,
    hour: int = 12,
) -> TradeRecord:
    year, month, dom = (int(part) for part in day.split("-"))
    return TradeRecord(
        id=trade_id,
        timestamp=datetime(year, month, dom, hour, 0, tzinfo=timezone.utc),
        trade_size=size,
        price=Decimal(price),
        symbol=symbol,
    )


@pytest.fixture(scope="module")
def generated_trades() -> list[TradeRecord]:
    repository = RandomTradesRepository(
        seed=11,
        trade_count=400,
        history_days=400,
        now=datetime(2024, 6, 28, 20, 0, tzinfo=timezone.utc),
    )
    repository.initialize()
    return repository.query_trades(datetime(2000, 1, 1, tzinfo=timezone.utc), Decimal("0"))


class TestPeriodKey:
    """Tests for period key derivation."""

    def test_daily_key_is_zero_padded(self) -> None:
        ts = datetime(2024, 3, 5, 15, 30, tzinfo=timezone.utc)
        assert period_key(ts, Granularity.DAILY) == "2024-03-05"

    def test_monthly_key_is_zero_padded(self) -> None:
        ts = datetime(2024, 3, 5, tzinfo=timezone.utc)
        assert period_key(ts, Granularity.MONTHLY) == "2024-03"

    @pytest.mark.parametrize(
        "month, quarter",
        [(1, 1), (3, 1), (4, 2), (6, 2), (7, 3), (9, 3), (10, 4), (12, 4)],
    )
    def test_quarterly_key(self, month: int, quarter: int) -> None:
        ts = datetime(2024, month, 15, tzinfo=timezone.utc)
        assert period_key(ts, Granularity.QUARTERLY) == f"2024-Q{quarter}"

    def test_weekly_key_restarts_each_month(self) -> None:
        """1 March 2024 is a Friday: the first week holds Fri 1 and Sat 2."""
        assert period_key(datetime(2024, 3, 1), Granularity.WEEKLY) == "2024-W1-3"
        assert period_key(datetime(2024, 3, 2), Granularity.WEEKLY) == "2024-W1-3"
        assert period_key(datetime(2024, 3, 3), Granularity.WEEKLY) == "2024-W2-3"
        assert period_key(datetime(2024, 3, 31), Granularity.WEEKLY) == "2024-W6-3"

    def test_weekly_key_month_starting_on_sunday(self) -> None:
        """1 September 2024 is a Sunday: weeks are plain 7-day blocks."""
        assert period_key(datetime(2024, 9, 7), Granularity.WEEKLY) == "2024-W1-9"
        assert period_key(datetime(2024, 9, 8), Granularity.WEEKLY) == "2024-W2-9"

    def test_weekly_key_month_is_not_padded(self) -> None:
        assert period_key(datetime(2024, 11, 20), Granularity.WEEKLY) == "2024-W4-11"

    def test_string_granularity_accepted(self) -> None:
        assert period_key(datetime(2024, 3, 5), "Monthly") == "2024-03"

    @pytest.mark.parametrize("granularity", ["Hourly", "", None, "daily"])
    def test_unknown_granularity_buckets_by_day(self, granularity) -> None:
        assert period_key(datetime(2024, 3, 5, 23, 59), granularity) == "2024-03-05"

    def test_calendar_fields_taken_as_given(self) -> None:
        """No timezone conversion: the timestamp's own wall clock decides."""
        ts = datetime(2024, 3, 31, 23, 30, tzinfo=timezone.utc)
        assert period_key(ts, Granularity.MONTHLY) == "2024-03"


class TestAggregateTrades:
    """Tests for aggregate_trades."""

    @pytest.mark.parametrize("granularity", ALL_GRANULARITIES + ["Hourly"])
    def test_empty_input_returns_empty_list(self, granularity) -> None:
        assert aggregate_trades([], granularity) == []

    def test_quarterly_same_quarter_single_bucket(self) -> None:
        trades = [_trade("2024-01-15", trade_id=1), _trade("2024-03-20", trade_id=2)]

        buckets = aggregate_trades(trades, Granularity.QUARTERLY)

        assert len(buckets) == 1
        assert buckets[0].period == "2024-Q1"
        assert buckets[0].trade_count == 2

    def test_monthly_weighted_average_price(self) -> None:
        trades = [
            _trade("2024-02-01", size=10, price="100", trade_id=1),
            _trade("2024-02-15", size=30, price="200", trade_id=2),
        ]

        buckets = aggregate_trades(trades, Granularity.MONTHLY)

        assert len(buckets) == 1
        assert buckets[0].period == "2024-02"
        assert buckets[0].total_trade_size == 40
        assert buckets[0].average_price == Decimal("175")

    def test_daily_symbol_counts(self) -> None:
        trades = [
            _trade("2024-05-06", symbol="AAPL", trade_id=1),
            _trade("2024-05-06", symbol="AAPL", trade_id=2),
            _trade("2024-05-06", symbol="MSFT", trade_id=3),
        ]

        buckets = aggregate_trades(trades, Granularity.DAILY)

        assert len(buckets) == 1
        assert buckets[0].symbols == {"AAPL": 2, "MSFT": 1}

    def test_single_trade_average_equals_price(self) -> None:
        buckets = aggregate_trades([_trade("2024-05-06", size=137, price="187.35")], "Daily")
        assert buckets[0].average_price == Decimal("187.35")

    def test_zero_size_bucket_has_zero_average(self) -> None:
        trades = [
            _trade("2024-05-06", size=0, price="50", trade_id=1),
            _trade("2024-05-06", size=0, price="70", trade_id=2),
        ]

        bucket = aggregate_trades(trades, Granularity.DAILY)[0]

        assert bucket.total_trade_size == 0
        assert bucket.average_price == 0
        assert bucket.trade_count == 2

    def test_unknown_granularity_falls_back_to_daily(self) -> None:
        trades = [_trade("2024-05-06", trade_id=1), _trade("2024-05-07", trade_id=2)]

        buckets = aggregate_trades(trades, "Hourly")

        assert [b.period for b in buckets] == ["2024-05-06", "2024-05-07"]

    def test_output_sorted_regardless_of_input_order(self) -> None:
        trades = [
            _trade("2024-07-01", trade_id=1),
            _trade("2023-12-31", trade_id=2),
            _trade("2024-02-29", trade_id=3),
        ]

        buckets = aggregate_trades(trades, Granularity.MONTHLY)

        assert [b.period for b in buckets] == ["2023-12", "2024-02", "2024-07"]

    def test_input_list_not_mutated(self) -> None:
        trades = [_trade("2024-07-01", trade_id=1), _trade("2023-12-31", trade_id=2)]
        original = list(trades)

        aggregate_trades(trades, Granularity.DAILY)

        assert trades == original

    def test_accepts_any_iterable(self) -> None:
        trades = (_trade("2024-07-01", trade_id=i) for i in range(3))
        assert aggregate_trades(trades, Granularity.DAILY)[0].trade_count == 3

    def test_malformed_record_propagates(self) -> None:
        bad = TradeRecord(id=1, timestamp="2024-01-01", trade_size=1, price=Decimal("1"), symbol="X")
        with pytest.raises(AttributeError):
            aggregate_trades([bad], Granularity.DAILY)

    @pytest.mark.parametrize("granularity", ALL_GRANULARITIES)
    def test_totals_preserved(self, generated_trades, granularity) -> None:
        buckets = aggregate_trades(generated_trades, granularity)

        assert sum(b.total_trade_size for b in buckets) == sum(
            t.trade_size for t in generated_trades
        )
        assert sum(b.trade_count for b in buckets) == len(generated_trades)
        assert sum(sum(b.symbols.values()) for b in buckets) == len(generated_trades)

    @pytest.mark.parametrize("granularity", ALL_GRANULARITIES)
    def test_periods_sorted_and_unique(self, generated_trades, granularity) -> None:
        periods = [b.period for b in aggregate_trades(generated_trades, granularity)]
        assert periods == sorted(periods)
        assert len(periods) == len(set(periods))

    @pytest.mark.parametrize(
        "granularity", [Granularity.DAILY, Granularity.MONTHLY, Granularity.QUARTERLY]
    )
    def test_period_order_is_chronological(self, generated_trades, granularity) -> None:
        first_seen: dict[str, datetime] = {}
        for trade in sorted(generated_trades, key=lambda t: t.timestamp):
            first_seen.setdefault(period_key(trade.timestamp, granularity), trade.timestamp)

        periods = [b.period for b in aggregate_trades(generated_trades, granularity)]

        assert periods == sorted(first_seen, key=first_seen.get)

    @pytest.mark.parametrize("granularity", ALL_GRANULARITIES)
    def test_idempotent(self, generated_trades, granularity) -> None:
        assert aggregate_trades(generated_trades, granularity) == aggregate_trades(
            generated_trades, granularity
        )


class TestFormatPeriodForDisplay:
    """Tests for human-readable period labels."""

    def test_daily_unchanged(self) -> None:
        assert format_period_for_display("2024-03-05", Granularity.DAILY) == "2024-03-05"

    def test_weekly_label(self) -> None:
        assert format_period_for_display("2024-W2-3", Granularity.WEEKLY) == "2024 Week 2 (Month 3)"

    def test_monthly_label(self) -> None:
        assert format_period_for_display("2024-03", Granularity.MONTHLY) == "Mar 2024"
        assert format_period_for_display("2023-12", "Monthly") == "Dec 2023"

    def test_quarterly_label(self) -> None:
        label = format_period_for_display("2024-Q1", "Quarterly")
        assert "2024" in label
        assert "Q1" in label

    def test_unknown_granularity_unchanged(self) -> None:
        assert format_period_for_display("anything", "Hourly") == "anything"

    def test_malformed_monthly_key_raises(self) -> None:
        with pytest.raises(ValueError):
            format_period_for_display("March 2024", Granularity.MONTHLY)

    @pytest.mark.parametrize("granularity", ALL_GRANULARITIES)
    def test_labels_every_generated_period(self, generated_trades, granularity) -> None:
        for bucket in aggregate_trades(generated_trades, granularity):
            assert format_period_for_display(bucket.period, granularity)
