"""
Domain-specific errors for the trading bounded context.

All errors raised on purpose by trading code must be defined here.
These are mapped to HTTP responses at the interface layer and to
user-visible messages in the dashboard.
No framework imports allowed.
"""


class TradingDomainError(Exception):
    """Base error for all trading domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class MalformedTradeRecordError(TradingDomainError):
    """Raised when a raw trade record cannot be mapped to a TradeRecord."""

    def __init__(self, index: int, reason: str) -> None:
        super().__init__(f"Malformed trade record at index {index}: {reason}")
        self.index = index
        self.reason = reason


class TradeSourceUnavailableError(TradingDomainError):
    """Raised when the trade data source cannot be reached or answers badly."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Trade source unavailable: {reason}")
        self.reason = reason


class InvalidFilterError(TradingDomainError):
    """Raised when a dashboard filter value cannot be parsed."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid {field} {value!r}: {reason}")
        self.field = field
        self.value = value
        self.reason = reason
