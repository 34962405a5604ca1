"""
Centralized error handlers for FastAPI.

Maps trading domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tradeboard.domain.trading.errors import (
    InvalidFilterError,
    MalformedTradeRecordError,
    TradeSourceUnavailableError,
    TradingDomainError,
)

logger = logging.getLogger(__name__)

HTTP_422 = 422
HTTP_500 = 500
HTTP_502 = 502


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(InvalidFilterError)
    async def handle_invalid_filter(
        _request: Request, exc: InvalidFilterError
    ) -> JSONResponse:
        """Handle unparseable filter values."""
        logger.warning("Invalid filter %s: %s", exc.field, exc.reason)
        return _error_response(HTTP_422, "Invalid filter", exc.message)

    @app.exception_handler(MalformedTradeRecordError)
    async def handle_malformed_trade(
        _request: Request, exc: MalformedTradeRecordError
    ) -> JSONResponse:
        """Handle trade records that failed boundary validation."""
        logger.warning("Malformed trade record at index %d: %s", exc.index, exc.reason)
        return _error_response(HTTP_422, "Malformed trade record", exc.message)

    @app.exception_handler(TradeSourceUnavailableError)
    async def handle_source_unavailable(
        _request: Request, exc: TradeSourceUnavailableError
    ) -> JSONResponse:
        """Handle an unreachable upstream trade source."""
        logger.error("Trade source unavailable: %s", exc.reason)
        return _error_response(HTTP_502, "Trade source unavailable")

    @app.exception_handler(TradingDomainError)
    async def handle_trading_domain(
        _request: Request, exc: TradingDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled trading domain errors."""
        logger.error("Unhandled trading domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
