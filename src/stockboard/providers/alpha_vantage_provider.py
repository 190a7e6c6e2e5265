"""Alpha Vantage GLOBAL_QUOTE client."""

import logging
from typing import Any, Optional

import httpx

from stockboard.core.exceptions import RateLimitedError, SymbolNotFoundError, UpstreamError
from stockboard.domain.models import Quote, UNKNOWN_SECTOR

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.alphavantage.co/query"
DEFAULT_TIMEOUT_SECONDS = 10.0

# Keys Alpha Vantage puts in the body instead of data when the quota is exhausted
_RATE_LIMIT_KEYS = ("Note", "Information")


def parse_percent(value: str) -> float:
    """Parse an Alpha Vantage percent string such as '1.2500%'."""
    return float(str(value).strip().rstrip("%"))


def parse_global_quote(symbol: str, data: Any) -> Quote:
    """
    Turn a GLOBAL_QUOTE response body into a Quote or raise the matching error.

    Sector is not part of this endpoint and is always reported as Unknown.
    """
    if not isinstance(data, dict):
        raise UpstreamError(symbol, "unexpected response shape")

    for key in _RATE_LIMIT_KEYS:
        if data.get(key):
            raise RateLimitedError(symbol, str(data[key]))

    quote = data.get("Global Quote")
    if not quote:
        raise SymbolNotFoundError(symbol)
    if not isinstance(quote, dict):
        raise UpstreamError(symbol, "unexpected quote payload")

    try:
        return Quote(
            symbol=str(quote["01. symbol"]).upper(),
            price=float(quote["05. price"]),
            previous_close=float(quote["08. previous close"]),
            change_percent=parse_percent(quote["10. change percent"]),
            sector=UNKNOWN_SECTOR,
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise UpstreamError(symbol, f"malformed quote payload ({exc})") from exc


class AlphaVantageClient:
    """
    Market data provider backed by the Alpha Vantage GLOBAL_QUOTE endpoint.

    Free tier allows 5 calls per minute; callers are expected to cache.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: Optional[httpx.Client] = None,
    ):
        self._api_key = api_key
        self._base_url = base_url
        self._client = client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    @property
    def provider_name(self) -> str:
        return "alphavantage"

    def fetch_quote(self, symbol: str) -> Quote:
        """Fetch one symbol. One request, no retry."""
        params = {
            "function": "GLOBAL_QUOTE",
            "symbol": symbol,
            "apikey": self._api_key,
        }
        logger.info("Fetching %s from Alpha Vantage", symbol)
        try:
            response = self._client.get(self._base_url, params=params)
        except httpx.TimeoutException as exc:
            raise UpstreamError(symbol, "request timed out") from exc
        except httpx.HTTPError as exc:
            raise UpstreamError(symbol, str(exc) or exc.__class__.__name__) from exc

        if response.status_code == 429:
            raise RateLimitedError(symbol, "HTTP 429")
        if response.is_error:
            raise UpstreamError(symbol, f"HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamError(symbol, "response is not JSON") from exc

        return parse_global_quote(symbol, data)
