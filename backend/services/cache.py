"""Simple in-memory TTL cache for upstream responses. No Redis needed.

Note: Each worker (or serverless instance) has its own cache. Concurrent
misses on the same key may both hit upstream; the last write wins.
"""

import time
from collections import OrderedDict
from typing import Any, Callable


class TTLCache:
    """Freshness is measured from the write timestamp: an entry is served while
    ``now - timestamp < ttl_seconds``. When ``max_entries`` is positive the
    least recently used entry is evicted once the bound is exceeded.
    """

    def __init__(
        self,
        ttl_seconds: float = 3600,
        max_entries: int = 0,
        clock: Callable[[], float] = time.time,
    ):
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._store: OrderedDict[str, tuple[float, Any]] = OrderedDict()

    def get(self, key: str) -> Any | None:
        if key in self._store:
            timestamp, value = self._store[key]
            if self._clock() - timestamp < self.ttl_seconds:
                self._store.move_to_end(key)
                return value
            del self._store[key]
        return None

    def set(self, key: str, value: Any) -> None:
        self._store[key] = (self._clock(), value)
        self._store.move_to_end(key)
        if self.max_entries > 0:
            while len(self._store) > self.max_entries:
                self._store.popitem(last=False)

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)

    def stats(self) -> dict:
        return {
            "entries": len(self._store),
            "max_entries": self.max_entries,
            "ttl_seconds": self.ttl_seconds,
        }
