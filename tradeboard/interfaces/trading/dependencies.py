"""
Dependency injection for the trading bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the trading context.
"""

from functools import lru_cache

from tradeboard.application.trading.aggregate_trades import AggregateTradesUseCase
from tradeboard.application.trading.get_trades import GetTradesUseCase
from tradeboard.core.config import settings
from tradeboard.domain.trading.ports import TradesQueryable
from tradeboard.infrastructure.trading.random_trades import RandomTradesRepository


@lru_cache(maxsize=1)
def get_trades_repository() -> TradesQueryable:
    """Build the process-wide mock trades repository.

    Generated once per process so every request sees the same trades.
    """
    repository = RandomTradesRepository(
        seed=settings.mock_seed,
        trade_count=settings.mock_trade_count,
        history_days=settings.mock_history_days,
    )
    repository.initialize()
    return repository


def get_trades_use_case() -> GetTradesUseCase:
    """Build GetTradesUseCase with its infrastructure dependencies."""
    return GetTradesUseCase(trades_port=get_trades_repository())


def get_aggregate_trades_use_case() -> AggregateTradesUseCase:
    """Build AggregateTradesUseCase."""
    return AggregateTradesUseCase()
