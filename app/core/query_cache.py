# app/core/query_cache.py
"""
Key-addressed cache for dashboard read queries.

Every entry is stored under ``(QueryKey, params)``. Invalidation takes a
``QueryKey`` and drops all entries for that operation regardless of their
parameters, e.g. after an order mutation every cached order listing goes.

    cache = QueryCache(ttl_seconds=60)
    rows = cache.get_or_load(QueryKey.TOP_SELLING_PRODUCTS, (5,), load_rows)
    cache.invalidate(QueryKey.ORDERS)
"""

import logging
import threading
import time
from enum import Enum
from typing import Any, Callable, Hashable, TypeVar

from app.core.config import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class QueryKey(str, Enum):
    """Logical name of a cached read operation."""

    ORDERS = "orders"
    SALES_BY_PERIOD = "sales-by-period"
    TOP_SELLING_PRODUCTS = "top-selling-products"
    SALES_BY_CATEGORY = "sales-by-category"
    CONVERSION_METRICS = "conversion-metrics"
    RECENT_ACTIVITY = "recent-activity"


class QueryCache:
    """
    In-memory TTL cache, thread-safe.

    Loader exceptions are propagated and nothing is stored for that key.
    """

    def __init__(self, ttl_seconds: float = 60.0):
        self.ttl_seconds = ttl_seconds
        self._entries: dict[tuple[QueryKey, Hashable], tuple[float, Any]] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: QueryKey, params: Hashable = ()) -> Any | None:
        with self._lock:
            entry = self._entries.get((key, params))
            if entry is None:
                self.misses += 1
                return None
            stored_at, value = entry
            if time.monotonic() - stored_at > self.ttl_seconds:
                del self._entries[(key, params)]
                self.misses += 1
                return None
            self.hits += 1
            return value

    def set(self, key: QueryKey, params: Hashable, value: Any) -> None:
        with self._lock:
            self._entries[(key, params)] = (time.monotonic(), value)

    def get_or_load(
        self,
        key: QueryKey,
        params: Hashable,
        loader: Callable[[], T],
    ) -> T:
        """
        Return the cached value for ``(key, params)`` or call ``loader``.

        The loader runs outside the lock; two concurrent misses may both
        hit the remote store, the later result wins.
        """
        cached = self.get(key, params)
        if cached is not None:
            return cached
        value = loader()
        self.set(key, params, value)
        return value

    def invalidate(self, key: QueryKey) -> int:
        """
        Drop every entry stored under ``key``.

        Returns:
            Number of entries removed.
        """
        with self._lock:
            stale = [k for k in self._entries if k[0] is key]
            for k in stale:
                del self._entries[k]
        logger.debug("Invalidated %d cache entries for %s", len(stale), key.value)
        return len(stale)

    def clear(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


# Process-wide cache shared by all routers
query_cache = QueryCache(ttl_seconds=get_settings().QUERY_CACHE_TTL_SECONDS)
