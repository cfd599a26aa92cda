"""Simple in-memory TTL cache. No Redis needed.

Note: Each uvicorn worker has its own cache instance. With --workers 2,
the ticker list may be fetched twice (once per worker). The has/get pair is
not atomic either, so two concurrent misses in one worker can both hit the
upstream API; the last write wins. Both are accepted at this scale.
"""

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

DEFAULT_TTL_SECONDS = 300


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    created_at: float
    expires_at: float


class TTLCache:
    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._store: dict[str, CacheEntry] = {}

    def _live_entry(self, key: str) -> CacheEntry | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        if self._clock() < entry.expires_at:
            return entry
        # expired: drop lazily
        del self._store[key]
        return None

    def has(self, key: str) -> bool:
        with self._lock:
            return self._live_entry(key) is not None

    def get(self, key: str) -> Any:
        """Return the cached value. Raises KeyError unless has(key) is true."""
        with self._lock:
            entry = self._live_entry(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def set(self, key: str, value: Any, ttl_seconds: float | None = None) -> None:
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        now = self._clock()
        with self._lock:
            self._store[key] = CacheEntry(value=value, created_at=now, expires_at=now + ttl)

    def delete(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
