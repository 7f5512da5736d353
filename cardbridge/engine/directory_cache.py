"""Memoized directory lookups (users, projects) for cardbridge."""

import logging
import threading
import time
from typing import Callable, Generic, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DirectoryCache(Generic[T]):
    """Caches the result of a directory fetch.

    - ttl_seconds=None keeps the value for the life of the process.
    - An empty fetch result is not cached; the next get() fetches again.
    - Concurrent get() calls on a cold cache share one fetch (single-flight).
    - Fetch errors propagate and leave the cache unpopulated.
    """

    def __init__(
        self,
        fetch: Callable[[], List[T]],
        *,
        name: str,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._fetch = fetch
        self.name = name
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._items: List[T] = []
        self._loaded_at: Optional[float] = None

    def _is_fresh(self) -> bool:
        if not self._items or self._loaded_at is None:
            return False
        if self.ttl_seconds is None:
            return True
        return (self._clock() - self._loaded_at) < self.ttl_seconds

    @property
    def is_populated(self) -> bool:
        return self._is_fresh()

    def get(self) -> List[T]:
        """Return cached entries, fetching them first if missing or expired."""
        if self._is_fresh():
            return list(self._items)

        with self._lock:
            # Another caller may have loaded while we waited.
            if self._is_fresh():
                return list(self._items)

            items = list(self._fetch())
            self._items = items
            self._loaded_at = self._clock()
            logger.info(f"Loaded {len(items)} Basecamp {self.name}")
            for item in items:
                logger.debug(f"  {self.name}: {item}")
            return list(items)

    def invalidate(self) -> None:
        """Drop the cached value; the next get() fetches again."""
        with self._lock:
            self._items = []
            self._loaded_at = None
