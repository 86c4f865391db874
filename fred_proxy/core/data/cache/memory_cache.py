"""In-memory TTL cache for FRED observation payloads — thread-safe dict backing."""
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable

CACHE_TTL_SECONDS = 5 * 60  # 5 minutes

# Absent dates collapse onto this marker, so a literal "none" date shares a key
# with "no date supplied".
NO_DATE = "none"


def cache_key(series_id: str, start_date: str | None = None, end_date: str | None = None) -> str:
    return f"{series_id}-{start_date or NO_DATE}-{end_date or NO_DATE}"


@dataclass(frozen=True)
class CacheEntry:
    payload: Any
    stored_at: float


class SeriesCache:

    def __init__(self, ttl_seconds: float = CACHE_TTL_SECONDS, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str) -> CacheEntry | None:
        with self._lock:
            return self._entries.get(key)

    def is_fresh(self, entry: CacheEntry, now: float | None = None) -> bool:
        now = self._clock() if now is None else now
        return now - entry.stored_at < self.ttl_seconds

    def get_fresh(self, key: str, now: float | None = None) -> CacheEntry | None:
        """Return the entry for ``key`` only if it is still within the TTL.

        Stale entries are left in place; they are overwritten by the next
        successful fetch or dropped by :meth:`clear`.
        """
        entry = self.get(key)
        if entry is not None and self.is_fresh(entry, now):
            return entry
        return None

    def put(self, key: str, payload: Any, now: float | None = None) -> CacheEntry:
        entry = CacheEntry(payload=payload, stored_at=self._clock() if now is None else now)
        with self._lock:
            self._entries[key] = entry
        return entry

    def clear(self) -> int:
        with self._lock:
            self._entries.clear()
            return len(self._entries)

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._entries)

