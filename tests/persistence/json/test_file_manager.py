"""
Tests for FileManager file operations.
"""

import shutil
from pathlib import Path
from unittest.mock import patch

import pytest

from flatcache.persistence.exceptions import CacheParseError, CacheWriteError
from flatcache.persistence.json.file_manager import FileManager


@pytest.fixture
def manager() -> FileManager:
    return FileManager()


class TestReadWrite:
    def test_read_missing_file_returns_empty(self, manager: FileManager, tmp_path: Path):
        assert manager.read_file(tmp_path / "missing") == {}

    def test_write_then_read(self, manager: FileManager, tmp_path: Path):
        path = tmp_path / "nested" / "store"

        manager.write_file(path, {"a": [1, 2]})

        assert manager.read_file(path) == {"a": [1, 2]}
        assert [p.name for p in path.parent.iterdir()] == ["store"]

    def test_write_overwrites(self, manager: FileManager, tmp_path: Path):
        path = tmp_path / "store.json"
        manager.write_file(path, {"a": 1})

        manager.write_file(path, {"b": 2})

        assert manager.read_file(path) == {"b": 2}

    def test_read_non_utf8_raises_parse_error(self, manager: FileManager, tmp_path: Path):
        path = tmp_path / "store"
        path.write_bytes(b"\xff\xfe\x00garbage")

        with pytest.raises(CacheParseError):
            manager.read_file(path)

    def test_write_error_is_raised(self, manager: FileManager, tmp_path: Path, caplog):
        path = tmp_path / "store.json"

        with patch.object(Path, "replace", side_effect=PermissionError("denied")):
            with pytest.raises(CacheWriteError):
                manager.write_file(path, {"a": 1})

        assert "Failed to write file" in caplog.text
        assert list(tmp_path.iterdir()) == []

    def test_existing_tmp_named_file_is_untouched(
        self, manager: FileManager, tmp_path: Path
    ):
        sibling = tmp_path / "a.tmp"
        manager.write_file(sibling, {"keep": 1})

        manager.write_file(tmp_path / "a", {"mine": 2})

        assert manager.read_file(sibling) == {"keep": 1}
        assert manager.read_file(tmp_path / "a") == {"mine": 2}
        assert sorted(p.name for p in tmp_path.iterdir()) == ["a", "a.tmp"]


class TestDeletePath:
    def test_delete_file(self, manager: FileManager, tmp_path: Path):
        path = tmp_path / "store"
        path.write_text("{}", encoding="utf-8")

        assert manager.delete_path(path) is True
        assert not path.exists()

    def test_delete_directory_tree(self, manager: FileManager, tmp_path: Path):
        root = tmp_path / "cache"
        (root / "sub").mkdir(parents=True)
        (root / "one").write_text("{}", encoding="utf-8")
        (root / "sub" / "two").write_text("{}", encoding="utf-8")

        assert manager.delete_path(root) is True
        assert not root.exists()

    def test_delete_missing_path(self, manager: FileManager, tmp_path: Path):
        assert manager.delete_path(tmp_path / "missing") is False

    def test_delete_failure_is_logged_not_raised(
        self, manager: FileManager, tmp_path: Path, caplog
    ):
        root = tmp_path / "cache"
        root.mkdir()
        (root / "file1").write_text("{}", encoding="utf-8")

        with patch.object(shutil, "rmtree", side_effect=OSError("Fake error")):
            assert manager.delete_path(root) is False

        assert "Failed to delete" in caplog.text
        assert str(root) in caplog.text
        assert root.exists()
