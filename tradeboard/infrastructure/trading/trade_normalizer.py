"""
Boundary normalizer: raw JSON trade records to TradeRecord entities.

Trade payloads come from an untrusted HTTP source whose field casing
varies between producers (timestamp, Timestamp, timeStamp ...).
Every accepted source name maps to one canonical field; any record that
is missing a field, carries conflicting casings or holds an unparseable
value is rejected with MalformedTradeRecordError.

A batch fails as a whole on its first malformed record.
"""

from collections.abc import Mapping
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable

from dateutil import parser as dateparser

from tradeboard.domain.trading.entities import TradeRecord
from tradeboard.domain.trading.errors import MalformedTradeRecordError

ID_FIELDS = ("id", "Id")
TIMESTAMP_FIELDS = ("timestamp", "Timestamp", "timeStamp")
TRADE_SIZE_FIELDS = ("tradeSize", "TradeSize", "trade_size")
PRICE_FIELDS = ("price", "Price")
SYMBOL_FIELDS = ("symbol", "Symbol")


def normalize_trades(raw_records: Iterable[Any]) -> list[TradeRecord]:
    """Normalize a batch of raw records, failing on the first bad one."""
    return [normalize_trade(raw, index) for index, raw in enumerate(raw_records)]


def normalize_trade(raw: Any, index: int = 0) -> TradeRecord:
    """Map one raw record to a TradeRecord.

    Args:
        raw: A decoded JSON object.
        index: Position of the record in its batch, used in error messages.

    Returns:
        The canonical trade record, with a UTC timestamp.

    Raises:
        MalformedTradeRecordError: If any field is missing or invalid.
    """
    if not isinstance(raw, Mapping):
        raise MalformedTradeRecordError(index, f"expected an object, got {type(raw).__name__}")

    return TradeRecord(
        id=_parse_id(_pick(raw, ID_FIELDS, "id", index), index),
        timestamp=_parse_timestamp(_pick(raw, TIMESTAMP_FIELDS, "timestamp", index), index),
        trade_size=_parse_trade_size(_pick(raw, TRADE_SIZE_FIELDS, "tradeSize", index), index),
        price=_parse_price(_pick(raw, PRICE_FIELDS, "price", index), index),
        symbol=_parse_symbol(_pick(raw, SYMBOL_FIELDS, "symbol", index), index),
    )


def _pick(raw: Mapping, names: tuple[str, ...], field: str, index: int) -> Any:
    """Return the single value stored under any of the accepted names."""
    found = [(name, raw[name]) for name in names if name in raw]
    if not found:
        raise MalformedTradeRecordError(index, f"missing {field}")

    _, value = found[0]
    for name, other in found[1:]:
        if other != value:
            raise MalformedTradeRecordError(
                index, f"ambiguous {field}: {found[0][0]!r} and {name!r} disagree"
            )
    return value


def _parse_id(value: Any, index: int) -> str | int:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise MalformedTradeRecordError(index, "id must be a string or an integer")
    return value


def _parse_timestamp(value: Any, index: int) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = dateparser.isoparse(value)
        except (ValueError, OverflowError):
            raise MalformedTradeRecordError(index, f"unparseable timestamp {value!r}")
    else:
        raise MalformedTradeRecordError(index, "timestamp must be an ISO-8601 string")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _to_decimal(value: Any, field: str, index: int) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise MalformedTradeRecordError(index, f"{field} must be a number")
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        raise MalformedTradeRecordError(index, f"{field} is not numeric: {value!r}")
    if not number.is_finite():
        raise MalformedTradeRecordError(index, f"{field} must be finite")
    return number


def _parse_trade_size(value: Any, index: int) -> int:
    size = _to_decimal(value, "tradeSize", index)
    if size < 0 or size != size.to_integral_value():
        raise MalformedTradeRecordError(
            index, f"tradeSize must be a non-negative integer, got {value!r}"
        )
    return int(size)


def _parse_price(value: Any, index: int) -> Decimal:
    price = _to_decimal(value, "price", index)
    if price <= 0:
        raise MalformedTradeRecordError(index, f"price must be positive, got {value!r}")
    return price


def _parse_symbol(value: Any, index: int) -> str:
    if not isinstance(value, str) or not value.strip():
        raise MalformedTradeRecordError(index, "symbol must be a non-empty string")
    return value.strip()
