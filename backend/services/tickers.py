"""Binance 24h ticker client.

Public endpoint, no key required. Returns the raw list of ticker records
(symbol, lastPrice, volume, ...) exactly as the exchange sends them.
Failures come back as ``Err(FetchError)``; nothing is retried or cached here.
"""

import logging

import httpx

from config import DEFAULT_TICKER_URL
from errors import FetchError
from services.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class TickerFetcher:
    """Fetches ticker lists over HTTP.

    ``transport`` is passed straight to ``httpx.AsyncClient``; tests use it to
    plug in an ``httpx.MockTransport``.
    """

    def __init__(self, timeout: float = 10, transport: httpx.AsyncBaseTransport | None = None):
        self.timeout = timeout
        self._transport = transport

    async def fetch(self, url: str) -> Result[list[dict], FetchError]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.get(url)
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("Ticker fetch returned HTTP %d from %s", status, url)
            return Err(FetchError(f"Upstream returned HTTP {status}", url, upstream_status=status))
        except httpx.RequestError as e:
            logger.warning("Ticker fetch failed for %s: %s", url, e)
            return Err(FetchError(f"Upstream request failed: {e}", url))
        except ValueError as e:
            # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors
            logger.warning("Ticker response from %s is not valid JSON: %s", url, e)
            return Err(FetchError("Upstream returned invalid JSON", url))

        if not isinstance(data, list):
            logger.warning("Ticker response from %s is %s, expected a list", url, type(data).__name__)
            return Err(FetchError("Upstream returned unexpected payload", url))

        logger.info("Fetched %d tickers from %s", len(data), url)
        return Ok(data)


async def fetch_crypto_list(
    amount: int,
    fetcher: TickerFetcher | None = None,
    url: str = DEFAULT_TICKER_URL,
) -> Result[list[dict], FetchError]:
    """Fetch the ticker list and keep only the first ``amount`` records."""
    if amount < 0:
        raise ValueError(f"amount must be >= 0 (got {amount})")
    fetcher = fetcher or TickerFetcher()
    result = await fetcher.fetch(url)
    if isinstance(result, Err):
        return result
    return Ok(result.value[:amount])
