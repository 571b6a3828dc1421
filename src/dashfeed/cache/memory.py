# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""In-memory response cache with per-entry TTL expiry.

Entries are checked lazily: an expired entry is treated as absent and
dropped the next time it is looked up.  :meth:`ResponseCache.prune_expired`
can be called to sweep everything at once, but no background task does so.

The cache is not locked.  It is only touched from the event loop, between
suspension points, so reads and writes never interleave.
"""

from __future__ import annotations

import logging
import time
from collections import OrderedDict
from collections.abc import Callable
from typing import Any

from dashfeed.core.constants import DEFAULT_CACHE_TTL

logger = logging.getLogger("dashfeed.cache.memory")


class CacheEntry:
    """One memoised response body."""

    __slots__ = ("key", "stored_at", "ttl", "value")

    def __init__(self, key: str, value: Any, stored_at: float, ttl: float) -> None:
        self.key = key
        self.value = value
        self.stored_at = stored_at
        self.ttl = ttl

    def is_valid(self, now: float) -> bool:
        return now - self.stored_at < self.ttl

    def __repr__(self) -> str:
        return f"CacheEntry(key={self.key!r}, stored_at={self.stored_at}, ttl={self.ttl})"


class CacheStats:
    """Simple hit/miss counter."""

    __slots__ = ("hits", "misses")

    def __init__(self) -> None:
        self.hits: int = 0
        self.misses: int = 0

    @property
    def total(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        return self.hits / self.total if self.total else 0.0

    def reset(self) -> None:
        self.hits = 0
        self.misses = 0

    def to_dict(self) -> dict[str, object]:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "total": self.total,
            "hit_rate": round(self.hit_rate, 4),
        }


class ResponseCache:
    """Key/value store of decoded response bodies with TTL support.

    Args:
        default_ttl: Seconds an entry stays valid when ``set`` is called
            without an explicit TTL.
        max_size: Maximum number of entries.  ``None`` or ``0`` means
            unbounded; otherwise the least recently used entry is evicted.
        clock: Monotonic time source, injectable for tests.
    """

    def __init__(
        self,
        default_ttl: float = DEFAULT_CACHE_TTL,
        max_size: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._store: OrderedDict[str, CacheEntry] = OrderedDict()
        self._default_ttl = default_ttl
        self._max_size = max_size or None
        self._clock = clock
        self._stats = CacheStats()

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, key: str) -> CacheEntry | None:
        """Return the live entry for *key*, or ``None`` if absent or expired.

        Unlike :meth:`get` this distinguishes a cached ``None`` body from a
        miss.
        """
        entry = self._store.get(key)
        if entry is None:
            self._stats.misses += 1
            return None
        if not entry.is_valid(self._clock()):
            del self._store[key]
            self._stats.misses += 1
            logger.debug("Cache entry expired: %s", key)
            return None
        self._store.move_to_end(key)
        self._stats.hits += 1
        return entry

    def get(self, key: str, default: Any = None) -> Any:
        entry = self.lookup(key)
        return default if entry is None else entry.value

    def exists(self, key: str) -> bool:
        entry = self._store.get(key)
        if entry is None:
            return False
        if not entry.is_valid(self._clock()):
            del self._store[key]
            return False
        return True

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        """Insert or overwrite *key*, stamping the current time."""
        effective_ttl = self._default_ttl if ttl is None else ttl
        if key in self._store:
            self._store.move_to_end(key)
        self._store[key] = CacheEntry(
            key=key, value=value, stored_at=self._clock(), ttl=effective_ttl
        )
        if self._max_size is not None:
            while len(self._store) > self._max_size:
                evicted, _ = self._store.popitem(last=False)
                logger.debug("Cache evicted %s (max_size=%d)", evicted, self._max_size)

    def delete(self, key: str) -> bool:
        try:
            del self._store[key]
        except KeyError:
            return False
        return True

    def clear(self) -> int:
        count = len(self._store)
        self._store.clear()
        return count

    def prune_expired(self) -> int:
        """Remove all expired entries.  Returns how many were dropped."""
        now = self._clock()
        expired = [k for k, v in self._store.items() if not v.is_valid(now)]
        for k in expired:
            del self._store[k]
        return len(expired)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def size(self) -> int:
        """Return the number of live (non-expired) entries."""
        self.prune_expired()
        return len(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.exists(key)

    @property
    def default_ttl(self) -> float:
        return self._default_ttl

    @property
    def stats(self) -> CacheStats:
        return self._stats
