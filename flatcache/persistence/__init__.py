"""Persistence layer for flatcache."""

from .exceptions import (
    CacheParseError,
    CacheSerializationError,
    CacheWriteError,
    FlatCacheError,
)

__all__ = [
    "CacheParseError",
    "CacheSerializationError",
    "CacheWriteError",
    "FlatCacheError",
]
