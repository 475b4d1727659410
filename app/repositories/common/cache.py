"""Cache repository - in-memory TTL store shared by all services."""

import threading
import time
from collections.abc import Callable
from typing import Any

from loguru import logger

from app.models.common import CacheEntry
from settings import CACHE_TTL


class CacheRepository:
    """Key-value store with per-entry expiration.

    An entry is visible while ``now - written_at < ttl``. Stale entries are
    dropped by the read that finds them; there is no background sweep and no
    size limit.
    """

    def __init__(self, ttl: float = CACHE_TTL, clock: Callable[[], float] = time.monotonic):
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        logger.debug("CacheRepository initialized: ttl={}s", ttl)

    def get(self, key: str) -> Any | None:
        """Cached value, or None if missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                logger.debug("Cache miss: {}", key)
                return None

            if self._clock() - entry.written_at >= self._ttl:
                del self._entries[key]
                logger.debug("Cache expired: {}", key)
                return None

            logger.debug("Cache hit: {}", key)
            return entry.value

    def set(self, key: str, value: Any) -> None:
        """Store value, replacing any existing entry."""
        with self._lock:
            self._entries[key] = CacheEntry(value=value, written_at=self._clock())
        logger.debug("Cache saved: {}", key)

    def clear(self) -> None:
        """Drop all entries."""
        with self._lock:
            self._entries.clear()
        logger.info("All cache cleared")

    def stats(self) -> dict:
        """Entry count and keys (stale entries included until read)."""
        with self._lock:
            keys = list(self._entries)
        return {"count": len(keys), "keys": keys}
