"""
flatcache - file-backed key-value cache

Load a named store, read and write JSON values under string keys, and save
the entries visited since the last save back to a single JSON file.
"""

from .core.config.settings import settings
from .persistence.exceptions import (
    CacheParseError,
    CacheSerializationError,
    CacheWriteError,
    FlatCacheError,
)
from .persistence.json import (
    FlatCache,
    clear_all,
    clear_cache_by_id,
    create,
    create_from_file,
    load,
)

__version__ = settings.version

__all__ = [
    # Factory functions
    "create",
    "create_from_file",
    "load",
    "clear_cache_by_id",
    "clear_all",
    # Cache instance
    "FlatCache",
    # Errors
    "FlatCacheError",
    "CacheParseError",
    "CacheWriteError",
    "CacheSerializationError",
]
