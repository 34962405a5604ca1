"""
Application entry point for the mock trades backend.

Creates the FastAPI application and wires together:
- Routers (trades, health)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (CORS, headers, rate limiting)
- Logging configuration
- Mock trade generation at startup

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from tradeboard.core.config import settings
from tradeboard.interfaces.health import router as health_router
from tradeboard.interfaces.trading.dependencies import get_trades_repository
from tradeboard.interfaces.trading.router import router as trades_router
from tradeboard.shared.errors.handlers import register_error_handlers
from tradeboard.shared.logging import configure_logging
from tradeboard.shared.security.headers import SecurityHeadersMiddleware
from tradeboard.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: generate the mock trades before serving."""
    get_trades_repository()
    logger.info(
        "%s v%s serving trades under %s",
        settings.project_name,
        settings.version,
        settings.api_prefix,
    )
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the backend.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(trades_router, prefix=settings.api_prefix)

    return app


app = create_app()


def run() -> None:
    """Serve the backend with uvicorn on the configured host and port."""
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
