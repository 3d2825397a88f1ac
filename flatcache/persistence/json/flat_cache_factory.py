"""
Factory functions for JSON flat caches.

Resolves store ids to backing file locations and clears stores without
needing a live cache instance.
"""

import logging
import warnings
from pathlib import Path

from .file_manager import file_manager
from .flat_cache import FlatCache

logger = logging.getLogger("FlatCacheFactory")

# <project root>/.cache, next to the flatcache package
DEFAULT_CACHE_DIR = Path(__file__).resolve().parents[3] / ".cache"


def resolve_cache_path(doc_id: str, cache_dir: str | Path | None = None) -> Path:
    """
    Get the absolute path of the backing file for a store.

    Args:
        doc_id: Store identifier, also used as the file name
        cache_dir: Directory holding the file (default: DEFAULT_CACHE_DIR)

    Returns:
        Absolute path to the cache file
    """
    directory = Path(cache_dir) if cache_dir else DEFAULT_CACHE_DIR
    return (directory / doc_id).resolve()


def create(doc_id: str, cache_dir: str | Path | None = None) -> FlatCache:
    """
    Load the cache identified by the given id.

    If no file exists for it yet, the cache starts empty.

    Args:
        doc_id: Store identifier, also used as the file name
        cache_dir: Directory to persist the data to (default: DEFAULT_CACHE_DIR)

    Returns:
        New, independent FlatCache instance
    """
    return FlatCache(resolve_cache_path(doc_id, cache_dir))


def load(doc_id: str, cache_dir: str | Path | None = None) -> FlatCache:
    """
    Alias for create().

    DEPRECATED: use create() instead.
    """
    warnings.warn(
        "flatcache.load() is deprecated, use flatcache.create() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return create(doc_id, cache_dir)


def create_from_file(file_path: str | Path) -> FlatCache:
    """Load a cache by addressing its backing file directly."""
    file_path = Path(file_path)
    return create(file_path.name, file_path.parent)


def clear_cache_by_id(doc_id: str, cache_dir: str | Path | None = None) -> bool:
    """
    Delete the backing file of a store.

    Returns:
        True if the file was deleted, False otherwise
    """
    return file_manager.delete_path(resolve_cache_path(doc_id, cache_dir))


def clear_all(cache_dir: str | Path | None = None) -> bool:
    """
    Delete a whole cache directory with every store in it.

    Returns:
        True if the directory was deleted, False otherwise
    """
    directory = Path(cache_dir).resolve() if cache_dir else DEFAULT_CACHE_DIR
    deleted = file_manager.delete_path(directory)
    if deleted:
        logger.info(f"Cleared cache directory {directory}")
    return deleted
