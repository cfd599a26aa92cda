import asyncio

import pytest

from errors import FetchError
from services.cache import TTLCache
from services.crypto_list import CACHE_KEY, CryptoListService
from services.result import Err, Ok

from conftest import TICKERS, FakeFetcher

URL = "https://upstream.test/ticker"


def _service(fetcher, clock, limit=2, ttl=5):
    return CryptoListService(TTLCache(ttl_seconds=ttl, clock=clock), fetcher, URL, limit=limit)


@pytest.mark.parametrize("limit", [0, 1, 2, 9, 10, 11, 100])
def test_returns_at_most_limit_records(clock, limit):
    service = _service(FakeFetcher(), clock, limit=limit)

    result = asyncio.run(service.get_list())

    assert isinstance(result, Ok)
    assert len(result.value) == min(limit, len(TICKERS))
    assert result.value == TICKERS[:limit]


def test_hit_within_ttl_skips_upstream(clock):
    fetcher = FakeFetcher()
    service = _service(fetcher, clock)

    first = asyncio.run(service.get_list())
    clock.advance(1)
    second = asyncio.run(service.get_list())

    assert first == second
    assert fetcher.calls == [URL]


def test_refetch_after_expiry_overwrites_entry(clock):
    fetcher = FakeFetcher()
    service = _service(fetcher, clock)

    asyncio.run(service.get_list())
    clock.advance(6)
    fetcher.records = list(reversed(TICKERS))
    result = asyncio.run(service.get_list())

    assert len(fetcher.calls) == 2
    assert result.value == list(reversed(TICKERS))[:2]
    assert service.cache.get(CACHE_KEY) == result.value
    clock.advance(4)
    assert service.is_warm


def test_failure_leaves_cache_empty(clock):
    fetcher = FakeFetcher(error=FetchError("boom", URL))
    service = _service(fetcher, clock)

    result = asyncio.run(service.get_list())

    assert isinstance(result, Err)
    assert not service.cache.has(CACHE_KEY)


def test_failure_after_expiry_does_not_touch_stale_entry(clock):
    fetcher = FakeFetcher()
    service = _service(fetcher, clock)
    asyncio.run(service.get_list())

    clock.advance(6)
    fetcher.error = FetchError("boom", URL)
    result = asyncio.run(service.get_list())

    assert isinstance(result, Err)
    assert not service.is_warm


def test_negative_limit_rejected(clock):
    with pytest.raises(ValueError):
        _service(FakeFetcher(), clock, limit=-1)


def test_returned_list_does_not_alias_cache(clock):
    fetcher = FakeFetcher()
    service = _service(fetcher, clock)

    asyncio.run(service.get_list()).value.clear()
    hit = asyncio.run(service.get_list())
    hit.value.append({"symbol": "JUNK"})

    assert service.cache.get(CACHE_KEY) == TICKERS[:2]
    assert asyncio.run(service.get_list()).value == TICKERS[:2]
    assert len(fetcher.calls) == 1
