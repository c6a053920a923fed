"""
Cache store package for lrukit.

This package contains the cache store base class, the LRU cache and the
internal structures it is built from.
"""

# Base classes
from .base import BaseCacheStore

# Internal structures
from .recency_list import Handle, RecencyList
from .index_map import IndexMap

# Store implementations
from .lru import CacheMetrics, LruCache

__all__ = [
    "BaseCacheStore",
    "Handle",
    "RecencyList",
    "IndexMap",
    "CacheMetrics",
    "LruCache",
]
