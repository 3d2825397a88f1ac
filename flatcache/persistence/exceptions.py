"""
Exception hierarchy for flatcache persistence.

Parse errors are recovered while loading a cache; write and serialization
errors propagate out of save().
"""


class FlatCacheError(Exception):
    """Base exception for cache persistence errors."""

    pass


class CacheParseError(FlatCacheError):
    """Raised when backing file content cannot be decoded into a cache map."""

    pass


class CacheWriteError(FlatCacheError):
    """Raised when the backing file or its directory cannot be written."""

    pass


class CacheSerializationError(FlatCacheError):
    """Raised when a stored value has no JSON representation."""

    pass
