"""
JSON file-backed cache implementation.

Each store lives in a single JSON document on disk. Suitable for a single
process that owns its stores; concurrent writers are not coordinated.

Usage:
    cache = create("someId")
    cache.set_key("answer", 42)
    cache.save()
"""

from .flat_cache import FlatCache
from .flat_cache_factory import (
    DEFAULT_CACHE_DIR,
    clear_all,
    clear_cache_by_id,
    create,
    create_from_file,
    load,
    resolve_cache_path,
)

__all__ = [
    "DEFAULT_CACHE_DIR",
    "FlatCache",
    "clear_all",
    "clear_cache_by_id",
    "create",
    "create_from_file",
    "load",
    "resolve_cache_path",
]
