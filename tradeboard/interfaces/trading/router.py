"""
FastAPI router for the trading bounded context.

All routes delegate to use cases. No business logic here.
Query parameters are validated by FastAPI.
Error mapping is handled by centralized error handlers.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from fastapi import APIRouter, Depends, Query, Request

from tradeboard.application.trading.aggregate_trades import AggregateTradesUseCase
from tradeboard.application.trading.dtos import AggregateTradesCommand, GetTradesQuery
from tradeboard.application.trading.get_trades import GetTradesUseCase
from tradeboard.core.config import settings
from tradeboard.interfaces.trading.dependencies import (
    get_aggregate_trades_use_case,
    get_trades_use_case,
)
from tradeboard.interfaces.trading.schemas import (
    AggregatedPeriodItem,
    ErrorResponse,
    TradeItem,
)
from tradeboard.shared.security.rate_limiting import limiter

DEFAULT_LOOKBACK = timedelta(days=365)

router = APIRouter(prefix="/trades", tags=["trades"])


def _build_query(start_timestamp: datetime | None, min_quote_size: Decimal) -> GetTradesQuery:
    """Resolve the default start and pin naive timestamps to UTC."""
    if start_timestamp is None:
        start_timestamp = datetime.now(timezone.utc) - DEFAULT_LOOKBACK
    elif start_timestamp.tzinfo is None:
        start_timestamp = start_timestamp.replace(tzinfo=timezone.utc)
    return GetTradesQuery(start_timestamp=start_timestamp, min_quote_size=min_quote_size)


@router.get(
    "",
    response_model=list[TradeItem],
    responses={422: {"model": ErrorResponse}},
    summary="List trades",
    description="Trades at or after startTimestamp with a size of at least minQuoteSize.",
)
@limiter.limit(settings.rate_limit_default)
def get_trades(
    request: Request,
    start_timestamp: datetime | None = Query(
        default=None,
        alias="startTimestamp",
        description="Earliest trade time (ISO-8601). Defaults to one year ago.",
    ),
    min_quote_size: Decimal = Query(
        default=Decimal("0"),
        alias="minQuoteSize",
        ge=0,
        description="Minimum trade size",
    ),
    use_case: GetTradesUseCase = Depends(get_trades_use_case),
) -> list[TradeItem]:
    """Return trades matching the filter."""
    trades = use_case.execute(_build_query(start_timestamp, min_quote_size))
    return [
        TradeItem(
            id=t.id,
            timestamp=t.timestamp,
            trade_size=t.trade_size,
            price=t.price,
            symbol=t.symbol,
        )
        for t in trades
    ]


@router.get(
    "/aggregated",
    response_model=list[AggregatedPeriodItem],
    responses={422: {"model": ErrorResponse}},
    summary="Aggregate trades by period",
    description=(
        "Trades matching the filter bucketed by Daily, Weekly, Monthly or "
        "Quarterly period. Unknown granularities bucket by day."
    ),
)
@limiter.limit(settings.rate_limit_heavy)
def get_aggregated_trades(
    request: Request,
    start_timestamp: datetime | None = Query(default=None, alias="startTimestamp"),
    min_quote_size: Decimal = Query(default=Decimal("0"), alias="minQuoteSize", ge=0),
    granularity: str = Query(default="Daily", max_length=20),
    trades_use_case: GetTradesUseCase = Depends(get_trades_use_case),
    aggregate_use_case: AggregateTradesUseCase = Depends(get_aggregate_trades_use_case),
) -> list[AggregatedPeriodItem]:
    """Return aggregated periods for trades matching the filter."""
    trades = trades_use_case.execute(_build_query(start_timestamp, min_quote_size))
    periods = aggregate_use_case.execute(
        AggregateTradesCommand(trades=tuple(trades), granularity=granularity)
    )
    return [
        AggregatedPeriodItem(
            period=p.period,
            label=p.label,
            total_trade_size=p.total_trade_size,
            average_price=p.average_price,
            trade_count=p.trade_count,
            symbols=p.symbols,
        )
        for p in periods
    ]
