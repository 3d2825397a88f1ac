"""Domain interfaces for flatcache."""

from .cache_interface import IFlatCache

__all__ = ["IFlatCache"]
