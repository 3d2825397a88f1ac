"""
Cache interface definition for flatcache.

Describes the instance surface every file-backed cache exposes: in-memory
reads and writes that record visited keys, and a save that drops the
entries nobody touched since the last save.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import JsonValue


class IFlatCache(ABC):
    """Interface for visited-set pruning key-value caches."""

    @abstractmethod
    def all(self) -> dict[str, Any]:
        """Return the whole persisted mapping without marking anything visited."""
        pass

    @abstractmethod
    def keys(self) -> list[str]:
        """Return the persisted keys."""
        pass

    @abstractmethod
    def set_key(self, key: str, value: JsonValue) -> None:
        """
        Store a value and mark its key visited.

        Args:
            key: Cache key
            value: Any JSON-compatible value, including self-referencing ones
        """
        pass

    @abstractmethod
    def get_key(self, key: str, default: Any = None) -> Any:
        """
        Return a stored value and mark its key visited.

        Args:
            key: Cache key
            default: Returned when the key is not stored

        Returns:
            Stored value or default
        """
        pass

    @abstractmethod
    def remove_key(self, key: str) -> None:
        """Forget a key in memory; no error if it is unknown."""
        pass

    @abstractmethod
    def save(self, no_prune: bool = False) -> None:
        """
        Write the persisted mapping to the backing file.

        Args:
            no_prune: Keep keys that were not visited since the last save
        """
        pass

    @abstractmethod
    def remove_cache_file(self) -> bool:
        """
        Delete the backing file, leaving memory untouched.

        Returns:
            True if a file was deleted, False otherwise
        """
        pass

    @abstractmethod
    def destroy(self) -> None:
        """Clear all in-memory state and delete the backing file."""
        pass
