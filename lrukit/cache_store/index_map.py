"""
Key lookup for the LRU cache.
"""

from typing import Dict, Generic, Hashable, Iterator, Optional, TypeVar

from .recency_list import Handle

K = TypeVar('K', bound=Hashable)


class IndexMap(Generic[K]):
    """Maps cache keys to the handle of their node in the RecencyList."""

    def __init__(self):
        self._handles: Dict[K, Handle] = {}

    def __len__(self) -> int:
        return len(self._handles)

    def __contains__(self, key: object) -> bool:
        return key in self._handles

    def __iter__(self) -> Iterator[K]:
        return iter(self._handles)

    def insert(self, key: K, handle: Handle) -> None:
        """Add or replace the mapping for ``key``."""
        self._handles[key] = handle

    def lookup(self, key: K) -> Optional[Handle]:
        return self._handles.get(key)

    def remove(self, key: K) -> Optional[Handle]:
        """
        Remove the mapping for ``key``.

        Returns:
            Optional[Handle]: The handle that was mapped, or None if the key was absent
        """
        return self._handles.pop(key, None)

    def clear(self) -> None:
        self._handles.clear()
