"""
Response Cache - time-bound in-memory memoization of API payloads.

Entries are keyed by (theme, level, bounds) and served while younger than
the freshness window. A stale entry is overwritten by the next compute;
nothing is purged in the background. The number of distinct keys is bounded
by the themes, levels and bounds boxes clients actually request.

Entry lifecycle:
    Absent --compute--> Fresh --window elapses--> Stale (= Absent) --compute--> Fresh

Usage:
    from journeymap.response_cache import ResponseCache, make_cache_key

    cache = ResponseCache(ttl_seconds=300)
    key = make_cache_key("borderscapes", "macroareas", bounds)
    payload = cache.get_or_compute(key, lambda: build_payload(...))
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, NamedTuple, Optional, Tuple, Union

from .constants import CACHE_DURATION_SECONDS

logger = logging.getLogger("journeymap")

ALL_BOUNDS = "all"
ANY_THEME = "*"


class CacheKey(NamedTuple):
    theme: str
    level: str
    bounds: Union[Tuple[float, float, float, float], str]

    def __str__(self) -> str:
        bounds = self.bounds
        if bounds != ALL_BOUNDS:
            bounds = ",".join(f"{edge:g}" for edge in bounds)
        return f"{self.theme}-{self.level}-{bounds}"


def make_cache_key(theme: Optional[str], level: str, bounds=None) -> CacheKey:
    """
    Build a normalized cache key.

    Args:
        theme: Canonical theme id, or None for theme-independent data
        level: Detail level ('countries' or 'macroareas')
        bounds: GeoBounds (or any 4-sequence north, south, east, west) or None
    """
    if bounds is None:
        normalized = ALL_BOUNDS
    else:
        normalized = tuple(float(edge) for edge in bounds)
    return CacheKey(theme or ANY_THEME, level, normalized)


@dataclass
class CacheEntry:
    value: Any
    stored_at: float


class ResponseCache:
    """
    In-memory cache with a fixed freshness window.

    One instance is created per process and passed to the request handlers.
    The read-check-compute-store sequence holds a re-entrant lock, so a
    threadpool host never computes the same key twice at once.
    """

    def __init__(self, ttl_seconds: float = CACHE_DURATION_SECONDS,
                 clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[CacheKey, CacheEntry] = {}
        self._lock = threading.RLock()
        self.hits = 0
        self.misses = 0

    def _is_fresh(self, entry: CacheEntry) -> bool:
        return self._clock() - entry.stored_at < self.ttl_seconds

    def get(self, key: CacheKey) -> Optional[Any]:
        """Fresh value for key, or None."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and self._is_fresh(entry):
                return entry.value
            return None

    def get_or_compute(self, key: CacheKey, compute_fn: Callable[[], Any]) -> Any:
        """
        Return the fresh cached value for key, computing and storing it on a
        miss. If compute_fn raises, nothing is stored.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and self._is_fresh(entry):
                self.hits += 1
                logger.debug(f"Cache hit: {key}")
                return entry.value

            self.misses += 1
            logger.debug(f"Cache miss: {key}")
            value = compute_fn()
            self._entries[key] = CacheEntry(value=value, stored_at=self._clock())
            return value

    def is_cached(self, key: CacheKey) -> bool:
        """Check if a fresh entry exists for key."""
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and self._is_fresh(entry)

    def clear(self) -> int:
        """Drop every entry and reset hit/miss counters. Returns the number of entries removed."""
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()
            self.hits = 0
            self.misses = 0
        logger.info(f"Response cache cleared ({removed} entries)")
        return removed

    def __len__(self) -> int:
        return len(self._entries)

    def stats(self) -> Dict:
        with self._lock:
            fresh = sum(1 for entry in self._entries.values() if self._is_fresh(entry))
            return {
                "entries": len(self._entries),
                "fresh_entries": fresh,
                "hits": self.hits,
                "misses": self.misses,
                "ttl_seconds": self.ttl_seconds,
            }
