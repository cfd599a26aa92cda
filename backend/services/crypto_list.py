"""Cached crypto list: one cache key in front of one upstream call."""

import logging

from errors import FetchError
from services.cache import TTLCache
from services.result import Err, Ok, Result
from services.tickers import TickerFetcher, fetch_crypto_list

logger = logging.getLogger(__name__)

CACHE_KEY = "crypto-list"
DEFAULT_LIMIT = 25


class CryptoListService:
    """Serve the truncated ticker list from cache, refetching once it expires."""

    def __init__(
        self,
        cache: TTLCache,
        fetcher: TickerFetcher,
        url: str,
        limit: int = DEFAULT_LIMIT,
    ):
        if limit < 0:
            raise ValueError(f"limit must be >= 0 (got {limit})")
        self.cache = cache
        self.fetcher = fetcher
        self.url = url
        self.limit = limit

    @property
    def is_warm(self) -> bool:
        return self.cache.has(CACHE_KEY)

    async def get_list(self) -> Result[list[dict], FetchError]:
        if self.cache.has(CACHE_KEY):
            logger.debug("Cache hit for %s", CACHE_KEY)
            # copy so callers can't mutate the cached list
            return Ok(list(self.cache.get(CACHE_KEY)))

        logger.debug("Cache miss for %s", CACHE_KEY)
        result = await fetch_crypto_list(self.limit, fetcher=self.fetcher, url=self.url)
        if isinstance(result, Err):
            return result

        self.cache.set(CACHE_KEY, result.value)
        return Ok(list(result.value))
