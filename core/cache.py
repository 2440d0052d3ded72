# =============================================================================
# core/cache.py  —  In-Memory Response Cache with Time-Based Expiry
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Keeps validated registry documents in memory for a fixed time-to-live so
#   repeated tool calls (list, search, categories, ...) don't each trigger a
#   network round-trip.
#
# SEMANTICS:
#   - get() returns a value only while it is younger than the TTL.
#   - An expired entry behaves exactly like a missing one.  It is NOT removed;
#     the next set() for that key simply overwrites it.
#   - There is no size bound.  Keys are "registry-index" plus one
#     "component-<name>" per component asked about, a small fixed universe.
#   - No locking.  Two concurrent misses for the same key may both fetch and
#     both set; the GETs are idempotent so either value is fine.
#
# The clock is injectable so tests can move time forward without sleeping.
# =============================================================================

from dataclasses import dataclass
import time
from typing import Any, Callable, Optional

DEFAULT_TTL_SECONDS = 300.0


@dataclass(frozen=True)
class CacheEntry:
    """A cached value and the clock reading at which it was stored."""

    value: Any
    stored_at: float


class TTLCache:
    """A string-keyed map whose entries go stale after ``ttl_seconds``."""

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[Any]:
        """Return the value stored under ``key``, or None if absent or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.stored_at < self.ttl_seconds:
            return entry.value
        return None

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = CacheEntry(value=value, stored_at=self._clock())

    def __len__(self) -> int:
        return len(self._entries)
