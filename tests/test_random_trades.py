"""
Tests for the random trades repository adapter.

The generator is seeded, so every assertion is deterministic.
"""

from datetime import datetime, time, timedelta, timezone
from decimal import Decimal

import pytest

from tradeboard.infrastructure.trading.random_trades import (
    BASE_PRICES,
    MAX_TRADE_SIZE,
    SYMBOLS,
    RandomTradesRepository,
)

NOW = datetime(2024, 6, 28, 20, 0, tzinfo=timezone.utc)
EPOCH = datetime(2000, 1, 1, tzinfo=timezone.utc)


def _repository(seed: int = 42, trade_count: int = 500) -> RandomTradesRepository:
    repository = RandomTradesRepository(
        seed=seed, trade_count=trade_count, history_days=365, now=NOW
    )
    repository.initialize()
    return repository


@pytest.fixture(scope="module")
def trades():
    return _repository().query_trades(EPOCH, Decimal("0"))


class TestRandomTradesRepository:
    """Test suite for the seeded mock trade generator."""

    def test_generates_requested_count(self, trades) -> None:
        assert len(trades) == 500

    def test_same_seed_same_trades(self, trades) -> None:
        assert _repository().query_trades(EPOCH, Decimal("0")) == trades

    def test_different_seed_different_trades(self, trades) -> None:
        assert _repository(seed=7).query_trades(EPOCH, Decimal("0")) != trades

    def test_ids_unique_and_one_based(self, trades) -> None:
        assert sorted(t.id for t in trades) == list(range(1, 501))

    def test_sorted_by_timestamp(self, trades) -> None:
        timestamps = [t.timestamp for t in trades]
        assert timestamps == sorted(timestamps)

    def test_within_trading_hours(self, trades) -> None:
        for trade in trades:
            assert time(9, 30) <= trade.timestamp.time() < time(16, 0)

    def test_within_history_window(self, trades) -> None:
        first_day = (NOW - timedelta(days=365)).date()
        for trade in trades:
            assert first_day <= trade.timestamp.date() <= NOW.date()

    def test_sizes_capped(self, trades) -> None:
        for trade in trades:
            assert 100 <= trade.trade_size <= MAX_TRADE_SIZE

    def test_prices_near_base(self, trades) -> None:
        for trade in trades:
            base = Decimal(str(BASE_PRICES[trade.symbol]))
            assert base * Decimal("0.95") - Decimal("0.01") <= trade.price
            assert trade.price <= base * Decimal("1.05") + Decimal("0.01")
            assert trade.price == trade.price.quantize(Decimal("0.01"))

    def test_symbols_from_catalog(self, trades) -> None:
        assert {t.symbol for t in trades} <= set(SYMBOLS)

    def test_popular_symbols_trade_more(self) -> None:
        trades = _repository(trade_count=3000).query_trades(EPOCH, Decimal("0"))
        counts = {s: sum(1 for t in trades if t.symbol == s) for s in SYMBOLS}
        assert counts["AAPL"] > counts["META"]

    def test_filters_by_start_and_size(self) -> None:
        repository = _repository()
        start = datetime(2024, 3, 1, tzinfo=timezone.utc)

        result = repository.query_trades(start, Decimal("250"))

        assert result
        assert all(t.timestamp >= start and t.trade_size >= 250 for t in result)
        expected = [
            t
            for t in repository.query_trades(EPOCH, Decimal("0"))
            if t.timestamp >= start and t.trade_size >= 250
        ]
        assert result == expected

    def test_naive_start_treated_as_utc(self) -> None:
        repository = _repository()
        aware = repository.query_trades(datetime(2024, 3, 1, tzinfo=timezone.utc), Decimal("0"))
        naive = repository.query_trades(datetime(2024, 3, 1), Decimal("0"))
        assert aware == naive

    def test_lazy_initialization(self) -> None:
        repository = RandomTradesRepository(seed=1, trade_count=20, now=NOW)
        assert len(repository.query_trades(EPOCH, Decimal("0"))) == 20
