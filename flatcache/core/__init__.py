"""Core infrastructure for flatcache: configuration and logging."""
