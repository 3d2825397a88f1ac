"""
File system operations for the JSON cache.

Handles reading and atomically writing cache files and recursive deletion.
Every call opens and closes its own file handle.
"""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Any

from ..exceptions import CacheParseError, CacheWriteError
from .serialization import from_json_string, to_json_string

logger = logging.getLogger("JSONFileManager")


class FileManager:
    """Manages file operations for JSON cache files."""

    def read_file(self, file_path: Path) -> dict[str, Any]:
        """
        Read and decode a cache file.

        Returns:
            Decoded cache map, or an empty dict if the file does not exist

        Raises:
            CacheParseError: file content is empty or not a valid cache document
            OSError: file exists but cannot be read
        """
        if not file_path.exists():
            return {}

        try:
            content = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CacheParseError(f"File {file_path} is not UTF-8 text") from e
        return from_json_string(content)

    def write_file(self, file_path: Path, data: dict[str, Any]) -> None:
        """
        Write data to a JSON file, creating parent directories as needed.

        Raises:
            CacheSerializationError: data holds a value with no JSON form
            CacheWriteError: directory creation, write or rename failed
        """
        # Serialize first; an unserializable value leaves the existing file untouched
        content = to_json_string(data)

        temp_file: Path | None = None
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)

            # Write to a unique temporary file first, then rename (atomic operation).
            # The name never collides with another store in the same directory.
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=file_path.parent,
                prefix=f".{file_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                temp_file = Path(f.name)
                f.write(content)
            temp_file.replace(file_path)
        except OSError as e:
            if temp_file is not None:
                temp_file.unlink(missing_ok=True)
            logger.error(f"Failed to write file {file_path}: {e}")
            raise CacheWriteError(f"Failed to write file {file_path}: {e}") from e

    def delete_path(self, path: Path) -> bool:
        """
        Delete a file or a whole directory tree.

        Returns:
            True if something was deleted, False if the path did not exist
            or deletion failed
        """
        if not self.file_exists(path):
            return False

        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
            return True
        except OSError as e:
            logger.error(f"Failed to delete {path}: {e}")
            return False

    def file_exists(self, path: Path) -> bool:
        """Check if a file or directory exists."""
        return path.exists() or path.is_symlink()


# Global file manager instance
file_manager = FileManager()
