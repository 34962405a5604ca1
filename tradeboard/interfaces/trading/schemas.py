"""
Pydantic schemas for the trades API responses.

These schemas define the API contract. Field names are snake_case in
Python and camelCase on the wire (tradeSize, averagePrice ...).
Decimal amounts are written as JSON numbers.
No business logic belongs here.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

JsonDecimal = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


class CamelModel(BaseModel):
    """Base schema serializing field names in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TradeItem(CamelModel):
    """A single trade as returned by GET /trades.

    Attributes:
        id: Trade identifier, unique within one response.
        timestamp: Execution time (UTC).
        trade_size: Number of shares traded.
        price: Execution price.
        symbol: Ticker symbol.
    """

    id: Union[int, str]
    timestamp: datetime
    trade_size: int
    price: JsonDecimal
    symbol: str


class AggregatedPeriodItem(CamelModel):
    """One aggregated period as returned by GET /trades/aggregated."""

    period: str
    label: str
    total_trade_size: int
    average_price: JsonDecimal
    trade_count: int
    symbols: dict[str, int]


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
