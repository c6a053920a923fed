"""
Fixed-capacity Least-Recently-Used cache.

Combines a RecencyList (recency order, MRU at the head) with an IndexMap
(key -> node handle) so that get, put and delete all run in O(1) expected
time. Every public operation updates both structures before returning, so
they always agree on the set of resident keys.
"""

import copy
import logging
from dataclasses import dataclass
from typing import Generic, Hashable, List, Optional, Tuple, TypeVar

from lrukit.cache_store.base import BaseCacheStore
from lrukit.cache_store.index_map import IndexMap
from lrukit.cache_store.recency_list import RecencyList
from lrukit.utils.validation import validate_capacity

logger = logging.getLogger(__name__)

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')


@dataclass
class CacheMetrics:
    """
    Counters describing cache activity.

    Attributes:
        hits: Number of successful lookups
        misses: Number of failed lookups
        evictions: Number of entries evicted to honour the capacity
        insertions: Number of puts that added a new key
        updates: Number of puts that replaced an existing value
        deletions: Number of deletes that removed a key
        resets: Number of reset() calls
        current_size: Number of resident entries
        capacity: Maximum number of resident entries
    """
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    insertions: int = 0
    updates: int = 0
    deletions: int = 0
    resets: int = 0
    current_size: int = 0
    capacity: int = 0

    @property
    def hit_rate(self) -> float:
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups > 0 else 0.0

    def to_dict(self) -> dict:
        """Convert metrics to a dictionary for easy serialization."""
        return {
            'hits': self.hits,
            'misses': self.misses,
            'hit_rate': self.hit_rate,
            'evictions': self.evictions,
            'insertions': self.insertions,
            'updates': self.updates,
            'deletions': self.deletions,
            'resets': self.resets,
            'current_size': self.current_size,
            'capacity': self.capacity,
        }

    def __str__(self) -> str:
        return (
            f"CacheMetrics(hits={self.hits}, misses={self.misses}, "
            f"hit_rate={self.hit_rate:.1%}, size={self.current_size}/{self.capacity}, "
            f"evictions={self.evictions})"
        )


class LruCache(BaseCacheStore, Generic[K, V]):
    """
    Bounded key/value cache evicting the least recently used entry.

    A "touch" is a get that hits or any put. Capacity counts entries, is
    fixed at construction and may be zero, in which case nothing is ever
    retained.

    Not thread-safe: callers sharing an instance across threads must guard
    every call with their own lock.

    Args:
        capacity: Maximum number of entries (non-negative integer)
        copy_values: Store a deep copy of every value passed to put() and hand
            out deep copies from get(), peek() and items(). Pass False to
            share value objects with the caller.
        name: Label attached to log records emitted by this cache
    """

    def __init__(self, capacity: int, copy_values: bool = True, name: Optional[str] = None):
        validate_capacity(capacity)
        self._capacity = capacity
        self._copy_values = copy_values
        self.name = name or "lru"

        self._entries: RecencyList[K, V] = RecencyList()
        self._index: IndexMap[K] = IndexMap()
        self._metrics = CacheMetrics(capacity=capacity)

        logger.debug(
            "LruCache created",
            extra={'extra_fields': {
                'event_type': 'cache_created',
                'cache_name': self.name,
                'capacity': capacity,
            }}
        )

    @property
    def capacity(self) -> int:
        return self._capacity

    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        """Membership test; does not count as a touch."""
        return key in self._index

    def __repr__(self) -> str:
        return f"LruCache(name={self.name!r}, size={len(self)}, capacity={self._capacity})"

    def _isolate(self, value: V) -> V:
        return copy.deepcopy(value) if self._copy_values else value

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """
        Look up ``key`` and mark it most recently used.

        Args:
            key: Key to look up
            default: Returned when the key is not cached

        Returns:
            The cached value, or ``default`` on a miss
        """
        handle = self._index.lookup(key)
        if handle is None:
            self._metrics.misses += 1
            return default

        self._entries.move_to_head(handle)
        self._metrics.hits += 1
        return self._isolate(self._entries.value_of(handle))

    def peek(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the cached value without changing recency or metrics."""
        handle = self._index.lookup(key)
        if handle is None:
            return default
        return self._isolate(self._entries.value_of(handle))

    def put(self, key: K, value: V) -> None:
        """
        Insert or replace ``key`` and mark it most recently used.

        Inserting a new key into a full cache evicts exactly one entry, the
        least recently used one.
        """
        handle = self._index.lookup(key)
        if handle is not None:
            self._entries.set_value(handle, self._isolate(value))
            self._entries.move_to_head(handle)
            self._metrics.updates += 1
            return

        handle = self._entries.push_head(key, self._isolate(value))
        self._index.insert(key, handle)
        self._metrics.insertions += 1

        if len(self._entries) > self._capacity:
            self._evict_lru()
        self._metrics.current_size = len(self._entries)

    def _evict_lru(self) -> None:
        evicted_key, _ = self._entries.pop_tail()
        self._index.remove(evicted_key)
        self._metrics.evictions += 1
        logger.debug(
            "Evicted least recently used entry",
            extra={'extra_fields': {
                'event_type': 'cache_eviction',
                'cache_name': self.name,
                'cache_key': repr(evicted_key),
            }}
        )

    def delete(self, key: K) -> bool:
        """
        Remove ``key`` if present.

        Returns:
            bool: True if the key was cached and has been removed
        """
        handle = self._index.remove(key)
        if handle is None:
            return False

        self._entries.remove(handle)
        self._metrics.deletions += 1
        self._metrics.current_size = len(self._entries)
        return True

    def reset(self) -> None:
        """Remove every entry. Capacity and metrics are kept."""
        self._entries.clear()
        self._index.clear()
        self._metrics.resets += 1
        self._metrics.current_size = 0
        logger.debug(
            "LruCache reset",
            extra={'extra_fields': {'event_type': 'cache_reset', 'cache_name': self.name}}
        )

    def keys(self) -> List[K]:
        """Snapshot of resident keys, most recently used first."""
        return [key for key, _ in self._entries]

    def items(self) -> List[Tuple[K, V]]:
        """Snapshot of resident entries, most recently used first."""
        return [(key, self._isolate(value)) for key, value in self._entries]

    def get_metrics(self) -> CacheMetrics:
        """
        Get a snapshot of the current cache metrics.

        Returns:
            CacheMetrics: A copy; later operations do not change it
        """
        self._metrics.current_size = len(self._entries)
        return copy.copy(self._metrics)

    def reset_metrics(self) -> None:
        """Zero all counters."""
        self._metrics = CacheMetrics(capacity=self._capacity, current_size=len(self._entries))
