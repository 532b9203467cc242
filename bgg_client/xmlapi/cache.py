"""
In-memory, time-expiring cache for game details.
"""

import logging
import threading
import time
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

logger = logging.getLogger(__name__)


class DetailCache:
    """
    Thread-safe key -> value store where every entry carries an absolute
    expiration timestamp set when it is stored.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        """
        Initialize the cache.

        Args:
            clock: Returns the current time in seconds
        """
        self._clock = clock
        self._entries: Dict[Hashable, Tuple[Any, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Optional[Any]:
        """Return the cached value, or None if absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                logger.debug(f"Cache entry for {key} expired")
                return None
            return value

    def put(self, key: Hashable, value: Any, ttl_seconds: float) -> None:
        """Store value under key, replacing any previous entry."""
        expires_at = self._clock() + ttl_seconds
        with self._lock:
            self._entries[key] = (value, expires_at)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


# Process-wide cache shared by clients that are not given their own
game_cache = DetailCache()
