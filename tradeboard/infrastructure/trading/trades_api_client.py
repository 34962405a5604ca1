"""
Adapter: HTTP trades API client.

Implements TradeSourcePort.
Fetches trade records from the trades backend with a single GET
request and maps the payload through the boundary normalizer.
No retry and no backoff: a failed fetch is reported to the caller.
"""

import logging
from datetime import datetime, timezone

import requests

from tradeboard.domain.trading.entities import TradeRecord
from tradeboard.domain.trading.errors import TradeSourceUnavailableError
from tradeboard.domain.trading.ports import TradeSourcePort
from tradeboard.infrastructure.trading.trade_normalizer import normalize_trades

logger = logging.getLogger(__name__)


class TradesApiClient(TradeSourcePort):
    """Concrete adapter fetching trades over HTTP.

    Implements the TradeSourcePort defined in the domain layer.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root, e.g. http://localhost:5072/api.
            timeout: Seconds to wait for the backend before giving up.
            session: Optional requests session, mainly for connection reuse.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def fetch_trades(
        self, start_timestamp: datetime, min_quote_size: int
    ) -> list[TradeRecord]:
        """Fetch trades at or after start_timestamp with size >= min_quote_size.

        Raises:
            TradeSourceUnavailableError: On connection errors, timeouts,
                non-2xx answers or a payload that is not a JSON array.
            MalformedTradeRecordError: If any record in the payload is invalid.
        """
        if start_timestamp.tzinfo is None:
            start_timestamp = start_timestamp.replace(tzinfo=timezone.utc)

        url = f"{self._base_url}/trades"
        params = {
            "startTimestamp": start_timestamp.isoformat(),
            "minQuoteSize": min_quote_size,
        }
        logger.info(
            "Fetching trades from %s (start=%s, min_size=%s)",
            url,
            params["startTimestamp"],
            min_quote_size,
        )

        try:
            response = self._session.get(url, params=params, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.ConnectionError:
            logger.error("Cannot connect to trades backend at %s", url)
            raise TradeSourceUnavailableError("cannot connect to the trades backend")
        except requests.exceptions.Timeout:
            logger.error("Trades backend timed out after %ss", self._timeout)
            raise TradeSourceUnavailableError(f"no answer within {self._timeout}s")
        except requests.exceptions.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else "?"
            logger.error("Trades backend answered HTTP %s", status)
            raise TradeSourceUnavailableError(f"API request failed with status: {status}")
        except ValueError:
            logger.error("Trades backend returned a non-JSON body")
            raise TradeSourceUnavailableError("response is not valid JSON")
        except requests.exceptions.RequestException as exc:
            logger.error("Trades request failed: %s", type(exc).__name__)
            raise TradeSourceUnavailableError(str(exc))

        if not isinstance(payload, list):
            raise TradeSourceUnavailableError("expected a JSON array of trades")

        trades = normalize_trades(payload)
        logger.info("Fetched %d trades successfully", len(trades))
        return trades
