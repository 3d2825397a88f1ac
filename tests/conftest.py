"""
Pytest configuration and common fixtures for flatcache tests.

Provides shared fixtures and configuration for all test modules.
"""

import json
from collections.abc import Generator
from pathlib import Path

import pytest

import flatcache
from flatcache.persistence.json import DEFAULT_CACHE_DIR
from flatcache.persistence.json.serialization import from_json_string


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    """Directory for caches created with an explicit location."""
    return tmp_path / ".cache2"


@pytest.fixture
def cache_file(cache_dir: Path) -> Path:
    """Path of a cache file addressed directly."""
    return cache_dir / "mycache-file.cache"


@pytest.fixture
def default_cache_dir() -> Generator[Path, None, None]:
    """Default cache directory, wiped before and after the test."""
    flatcache.clear_all()
    yield DEFAULT_CACHE_DIR
    flatcache.clear_all()


@pytest.fixture
def read_cache_file():
    """Helper returning the raw JSON document stored in a cache file."""

    def read(path: Path):
        return json.loads(path.read_text(encoding="utf-8"))

    return read


@pytest.fixture
def decode_cache_file():
    """Helper decoding a cache file with references restored."""

    def decode(path: Path):
        return from_json_string(path.read_text(encoding="utf-8"))

    return decode


# Environment setup for tests
@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("FLATCACHE_ENVIRONMENT", "PROD")
    monkeypatch.setenv("FLATCACHE_LOG_LEVEL", "DEBUG")
