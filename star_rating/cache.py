"""In-memory cache of rendered star strips.

Entries expire after ``ttl`` seconds *without access*: every hit re-inserts
the value, which restarts its countdown. Capacity is unbounded; entries only
leave through expiry or :meth:`StarCache.clear`.

Creation is not single-flight. Two concurrent misses for the same key may
both run the factory; the later store wins and both callers get equivalent
bytes.
"""

import logging
import math
import threading
import time
from typing import Awaitable, Callable, Hashable, Optional

from cachetools import TTLCache


DEFAULT_TTL_SECONDS = 4 * 60

logger = logging.getLogger(__name__)


class StarCache:
    """Thread-safe sliding-expiration cache mapping render keys to PNG bytes.

    Args:
        ttl: Idle lifetime of an entry in seconds.
        timer: Monotonic clock used for expiry; injectable for tests.
    """

    def __init__(
        self,
        ttl: float = DEFAULT_TTL_SECONDS,
        timer: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl
        self._entries: TTLCache = TTLCache(maxsize=math.inf, ttl=ttl, timer=timer)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            self._entries.expire()
            return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries

    def get(self, key: Hashable) -> Optional[bytes]:
        """Return the cached value for ``key`` and restart its expiry, or ``None``."""
        with self._lock:
            value = self._entries.get(key)
            if value is not None:
                self._entries[key] = value
        if value is None:
            logger.debug("Cache miss for %s", key)
        else:
            logger.debug("Cache hit for %s", key)
        return value

    def set(self, key: Hashable, value: bytes) -> None:
        with self._lock:
            self._entries[key] = value

    def get_or_create(self, key: Hashable, factory: Callable[[], bytes]) -> bytes:
        """Return the cached value for ``key``, building it with ``factory`` on a miss.

        ``factory`` runs outside the lock and at most once per call. Its
        exceptions propagate and nothing is stored.
        """
        value = self.get(key)
        if value is not None:
            return value
        value = factory()
        self.set(key, value)
        return value

    async def get_or_create_async(
        self, key: Hashable, factory: Callable[[], Awaitable[bytes]]
    ) -> bytes:
        """Async variant of :meth:`get_or_create`; awaits ``factory`` on a miss."""
        value = self.get(key)
        if value is not None:
            return value
        value = await factory()
        self.set(key, value)
        return value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
