"""
File-backed key-value cache with visited-key pruning.

A FlatCache holds two independent maps: the persisted entries and the set
of keys visited (read or written) since the last prune. Saving prunes the
persisted entries down to the visited keys unless asked not to.
"""

from pathlib import Path
from typing import Any

from pydantic import JsonValue

from flatcache.core.logging.logger import get_logger
from flatcache.domain.interfaces.cache_interface import IFlatCache

from ..exceptions import CacheParseError
from .file_manager import file_manager


class FlatCache(IFlatCache):
    """
    Single named store bound to one backing file.

    Content is loaded eagerly on construction. Nothing is durable until
    save() is called. Instances never share state with each other.
    """

    def __init__(self, location: Path):
        self.location = location
        self.logger = get_logger(__name__, store=location.name)

        self._visited: dict[str, bool] = {}
        self._persisted: dict[str, Any] = self._load()

    def _load(self) -> dict[str, Any]:
        """Read the backing file, falling back to an empty map."""
        try:
            persisted = file_manager.read_file(self.location)
        except (CacheParseError, OSError) as e:
            self.logger.warning(f"Ignoring unreadable cache file {self.location}: {e}")
            return {}

        self.logger.debug(f"Loaded {len(persisted)} entries from {self.location}")
        return persisted

    def all(self) -> dict[str, Any]:
        return self._persisted

    def keys(self) -> list[str]:
        return list(self._persisted)

    def set_key(self, key: str, value: JsonValue) -> None:
        self._visited[key] = True
        self._persisted[key] = value

    def get_key(self, key: str, default: Any = None) -> Any:
        # reading counts as a visit
        self._visited[key] = True
        return self._persisted.get(key, default)

    def remove_key(self, key: str) -> None:
        self._visited.pop(key, None)
        self._persisted.pop(key, None)

    def _prune(self) -> None:
        """
        Keep only the entries visited since the last prune.

        Visited keys that were never stored are dropped rather than
        materialized as empty entries. Does nothing when no key was
        visited, so a save right after loading keeps everything.
        """
        if not self._visited:
            return

        pruned = {
            key: self._persisted[key]
            for key in self._visited
            if key in self._persisted
        }
        dropped = len(self._persisted) - len(pruned)
        if dropped:
            self.logger.debug(f"Pruned {dropped} unvisited entries")

        self._visited = {}
        self._persisted = pruned

    def save(self, no_prune: bool = False) -> None:
        """
        Persist the cache to disk as a JSON document.

        Raises:
            CacheWriteError: the file or its directory could not be written
            CacheSerializationError: a stored value has no JSON form
        """
        if not no_prune:
            self._prune()

        file_manager.write_file(self.location, self._persisted)
        self.logger.debug(f"Saved {len(self._persisted)} entries to {self.location}")

    def remove_cache_file(self) -> bool:
        return file_manager.delete_path(self.location)

    def destroy(self) -> None:
        self._visited = {}
        self._persisted = {}

        self.remove_cache_file()

    def __repr__(self) -> str:
        return f"FlatCache(location={str(self.location)!r}, keys={len(self._persisted)})"
