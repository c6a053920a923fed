"""
lrukit - Fixed-capacity LRU Cache
=================================

A bounded key/value cache that evicts the least recently used entry, with
O(1) get, put and delete.
"""

__version__ = "0.1.0"

from .cache_store import BaseCacheStore, CacheMetrics, LruCache
from .exceptions import (
    LrukitError,
    ConfigurationError,
    ValidationError,
    CacheStoreError,
    CacheOperationError,
    StaleHandleError,
)

__all__ = [
    "LruCache",
    "CacheMetrics",
    "BaseCacheStore",
    "LrukitError",
    "ConfigurationError",
    "ValidationError",
    "CacheStoreError",
    "CacheOperationError",
    "StaleHandleError",
]
