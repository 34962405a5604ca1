"""
Tests for the HTTP trades API client adapter.

The requests session is mocked; no network access is needed.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
import requests

from tradeboard.domain.trading.errors import (
    MalformedTradeRecordError,
    TradeSourceUnavailableError,
)
from tradeboard.infrastructure.trading.trades_api_client import TradesApiClient

START = datetime(2024, 1, 1, tzinfo=timezone.utc)

PAYLOAD = [
    {"id": "0", "timeStamp": "2024-02-01T15:00:00Z", "tradeSize": 10, "price": 100.0, "symbol": "AAPL"},
    {"id": "1", "timeStamp": "2024-02-15T15:00:00Z", "tradeSize": 30, "price": 200.0, "symbol": "MSFT"},
]


def _session(payload=None, status_error=None) -> MagicMock:
    response = MagicMock()
    response.json.return_value = PAYLOAD if payload is None else payload
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    session = MagicMock()
    session.get.return_value = response
    return session


class TestTradesApiClient:
    """Test suite for TradesApiClient."""

    def test_fetch_sends_filter_parameters(self) -> None:
        session = _session()
        client = TradesApiClient("http://localhost:5072/api/", timeout=5.0, session=session)

        client.fetch_trades(START, 250)

        session.get.assert_called_once_with(
            "http://localhost:5072/api/trades",
            params={"startTimestamp": "2024-01-01T00:00:00+00:00", "minQuoteSize": 250},
            timeout=5.0,
        )

    def test_fetch_normalizes_records(self) -> None:
        client = TradesApiClient("http://api", session=_session())

        trades = client.fetch_trades(START, 0)

        assert [t.symbol for t in trades] == ["AAPL", "MSFT"]
        assert trades[1].trade_size == 30

    def test_naive_start_sent_as_utc(self) -> None:
        session = _session()
        TradesApiClient("http://api", session=session).fetch_trades(datetime(2024, 1, 1), 0)

        params = session.get.call_args.kwargs["params"]
        assert params["startTimestamp"].endswith("+00:00")

    def test_connection_error(self) -> None:
        session = MagicMock()
        session.get.side_effect = requests.exceptions.ConnectionError("refused")
        client = TradesApiClient("http://api", session=session)

        with pytest.raises(TradeSourceUnavailableError, match="cannot connect"):
            client.fetch_trades(START, 0)

    def test_timeout(self) -> None:
        session = MagicMock()
        session.get.side_effect = requests.exceptions.ReadTimeout()
        client = TradesApiClient("http://api", timeout=2.0, session=session)

        with pytest.raises(TradeSourceUnavailableError, match="2.0s"):
            client.fetch_trades(START, 0)

    def test_http_error_status(self) -> None:
        error = requests.exceptions.HTTPError(response=MagicMock(status_code=500))
        client = TradesApiClient("http://api", session=_session(status_error=error))

        with pytest.raises(TradeSourceUnavailableError, match="status: 500"):
            client.fetch_trades(START, 0)

    def test_invalid_json(self) -> None:
        session = _session()
        session.get.return_value.json.side_effect = ValueError("no json")
        client = TradesApiClient("http://api", session=session)

        with pytest.raises(TradeSourceUnavailableError, match="not valid JSON"):
            client.fetch_trades(START, 0)

    def test_non_list_payload(self) -> None:
        client = TradesApiClient("http://api", session=_session(payload={"error": "boom"}))

        with pytest.raises(TradeSourceUnavailableError, match="JSON array"):
            client.fetch_trades(START, 0)

    def test_malformed_record_propagates(self) -> None:
        payload = [dict(PAYLOAD[0], price="free")]
        client = TradesApiClient("http://api", session=_session(payload=payload))

        with pytest.raises(MalformedTradeRecordError):
            client.fetch_trades(START, 0)

    def test_empty_result(self) -> None:
        client = TradesApiClient("http://api", session=_session(payload=[]))
        assert client.fetch_trades(START, 0) == []
