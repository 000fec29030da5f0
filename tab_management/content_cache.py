"""
ContentCache - Bounded cache of rendered content for inactive tabs.
"""
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from error_handling import ConfigurationError
from tabs_config import DEFAULT_CACHE_LIMIT
from utils.event_logger import EventLogger, get_event_logger


class _Absent:
    """Marker returned by ContentCache.get for keys that are not cached."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


@dataclass
class CacheEntry:
    value: Any
    stored_at: float


class ContentCache:
    """
    Fixed-capacity key -> content mapping with first-in-first-out eviction.

    Eviction follows insertion order only. Reading an entry or updating the
    value of a key already present never moves it, so the entry evicted is
    always the earliest inserted one still present. This is not an LRU cache.

    Example:
        >>> cache = ContentCache(capacity=2)
        >>> cache.put("a", 1); cache.put("b", 2); cache.get("a")
        1
        >>> cache.put("c", 3)
        >>> cache.keys()
        ['b', 'c']
    """

    def __init__(self, capacity: int = DEFAULT_CACHE_LIMIT, event_logger: Optional[EventLogger] = None):
        """
        Initialize the cache.

        Args:
            capacity: Maximum number of entries kept after an insertion
            event_logger: Logger for cache events (defaults to the process logger)
        """
        self._capacity = self._validate_capacity(capacity)
        self._entries: Dict[str, CacheEntry] = {}
        self._logger = event_logger or get_event_logger()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    @staticmethod
    def _validate_capacity(capacity: int) -> int:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ConfigurationError(
                f"Cache capacity must be a positive integer, got {capacity!r}",
                operation="set_capacity"
            )
        return capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def keys(self) -> List[str]:
        """Cached keys in eviction order, oldest first."""
        return list(self._entries)

    def put(self, key: str, value: Any) -> None:
        """
        Store content for a key.

        An existing key keeps its place in eviction order and only gets the new
        value and timestamp. A new key first evicts the oldest entries until
        there is room, then goes to the newest end.
        """
        entry = self._entries.get(key)
        if entry is not None:
            entry.value = value
            entry.stored_at = time.time()
            self._logger.cache_stored(key, updated=True, size=len(self._entries))
            return

        # Loop because capacity may have been lowered since the last insert
        while self._entries and len(self._entries) >= self._capacity:
            oldest_key = next(iter(self._entries))
            del self._entries[oldest_key]
            self.evictions += 1
            self._logger.cache_evicted(oldest_key, capacity=self._capacity)

        self._entries[key] = CacheEntry(value=value, stored_at=time.time())
        self._logger.cache_stored(key, updated=False, size=len(self._entries))

    def get(self, key: str) -> Any:
        """
        Return the cached value, or ABSENT if the key is not cached.

        A stored None is returned as None, never confused with ABSENT.
        """
        entry = self._entries.get(key)
        if entry is None:
            self.misses += 1
            return ABSENT
        self.hits += 1
        return entry.value

    def stored_at(self, key: str) -> Optional[float]:
        entry = self._entries.get(key)
        return entry.stored_at if entry is not None else None

    def clear(self) -> None:
        """Remove every entry."""
        count = len(self._entries)
        self._entries.clear()
        self._logger.cache_cleared(count)

    def set_capacity(self, capacity: int) -> None:
        """
        Change the capacity used by future insertions.

        Existing entries are not evicted here even when there are more of them
        than the new capacity; the next insertion of a new key trims the cache.
        """
        previous = self._capacity
        self._capacity = self._validate_capacity(capacity)
        self._logger.cache_capacity_changed(self._capacity, previous=previous, size=len(self._entries))

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        total = self.hits + self.misses
        hit_rate = (self.hits / total * 100) if total > 0 else 0

        return {
            'hits': self.hits,
            'misses': self.misses,
            'hit_rate': hit_rate,
            'evictions': self.evictions,
            'cache_size': len(self._entries),
            'capacity': self._capacity
        }
