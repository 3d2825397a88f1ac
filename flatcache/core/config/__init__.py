"""Configuration module for flatcache."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
