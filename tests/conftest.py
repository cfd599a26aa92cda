import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import Settings
from errors import FetchError
from services.result import Err, Ok

TICKERS = [{"symbol": f"COIN{i}USDT", "lastPrice": str(100 + i), "volume": str(i * 10)} for i in range(10)]


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeFetcher:
    """Stands in for TickerFetcher; records every URL it is asked for."""

    def __init__(self, records=None, error: FetchError | None = None):
        self.records = TICKERS if records is None else records
        self.error = error
        self.calls: list[str] = []

    async def fetch(self, url: str):
        self.calls.append(url)
        if self.error is not None:
            return Err(self.error)
        return Ok(list(self.records))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def app_settings(monkeypatch):
    monkeypatch.setenv("CACHE_TTL_SECONDS", "5")
    monkeypatch.setenv("CRYPTO_LIST_LIMIT", "2")
    monkeypatch.setenv("TICKER_URL", "https://upstream.test/ticker")
    return Settings()


@pytest.fixture
def client(app_settings, fetcher, clock):
    app = create_app(app_settings, fetcher=fetcher, clock=clock)
    with TestClient(app) as c:
        yield c
