"""
Base class for cache stores.
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable, Optional


class BaseCacheStore(ABC):
    """Abstract base class for bounded, synchronous key/value cache stores."""

    @abstractmethod
    def get(self, key: Hashable, default: Optional[Any] = None) -> Optional[Any]:
        """
        Get a cached value.

        Args:
            key: The key to look up in the cache.
            default: Value returned when the key is not cached.

        Returns:
            The cached value if found, ``default`` otherwise.
        """
        pass

    @abstractmethod
    def put(self, key: Hashable, value: Any) -> None:
        """
        Add or replace a value in the cache.

        Args:
            key: The key to cache under.
            value: The value to cache.
        """
        pass

    @abstractmethod
    def delete(self, key: Hashable) -> bool:
        """
        Delete a key from the cache.

        Args:
            key: The key to delete

        Returns:
            bool: True if the key was found and deleted, False otherwise
        """
        pass

    @abstractmethod
    def reset(self) -> None:
        """Remove all cached items."""
        pass

    @abstractmethod
    def size(self) -> int:
        """Get the number of cached items."""
        pass

    @property
    @abstractmethod
    def capacity(self) -> int:
        """Maximum number of items the store retains."""
        pass
