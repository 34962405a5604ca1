"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface the mock backend binds to.
        port: Port the mock backend listens on.
        api_prefix: Path prefix under which every router is mounted.
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_heavy: Rate limit for compute-heavy endpoints.
        cors_origins: Origins allowed to call the API from a browser.
        mock_seed: Seed of the random trades generator.
        mock_trade_count: Number of trades generated at startup.
        mock_history_days: How far back generated trades go.
        trades_api_url: Base URL the dashboard fetches trades from.
        request_timeout_seconds: Timeout for outbound HTTP requests.

    The mock backend and the dashboard read the same settings so a
    single .env file configures both processes.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "TradeBoard"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 5072
    api_prefix: str = "/api"
    rate_limit_default: str = "60/minute"
    rate_limit_heavy: str = "30/minute"
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8501"]

    # Mock trades generator
    mock_seed: int = 42
    mock_trade_count: int = 5000
    mock_history_days: int = 365

    # Dashboard -> backend
    trades_api_url: str = "http://localhost:5072/api"
    request_timeout_seconds: float = 30.0


settings = Settings()
