"""
Settings for the flatcache library.

Simple environment variable configuration for logging. Cache locations are
never configured here: callers pass an explicit directory or get the default.
"""

import os
import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from dotenv import load_dotenv

# Load .env file for local development - look in current working directory
load_dotenv(".env")


def _get_version() -> str:
    """
    Get the flatcache version.

    Uses the installed distribution metadata. A source checkout that was never
    installed reads [project].version from the nearest pyproject.toml instead.
    """
    try:
        return version("flatcache")
    except PackageNotFoundError:
        pass

    for parent in Path(__file__).resolve().parents:
        pyproject_path = parent / "pyproject.toml"
        if not pyproject_path.is_file():
            continue
        try:
            with open(pyproject_path, "rb") as f:
                project = tomllib.load(f).get("project", {})
        except (OSError, tomllib.TOMLDecodeError):
            continue
        if project.get("name") == "flatcache" and project.get("version"):
            return project["version"]

    return "0.1.0"


class Settings:
    """Library settings with environment-based configuration."""

    def __init__(self):
        self.version: str = _get_version()

        # ================================================================
        # Logging Configuration
        # ================================================================
        self.log_level: str = os.getenv("FLATCACHE_LOG_LEVEL", "INFO")
        self.log_dir: str = os.getenv("FLATCACHE_LOG_DIR", "./logs")

        # Development/Production detection
        self.environment: str = os.getenv("FLATCACHE_ENVIRONMENT", "PROD")

        self._validate_settings()

    def _validate_settings(self):
        """Validate settings values."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR"]
        if self.log_level.upper() not in valid_levels:
            self.log_level = "INFO"
        self.log_level = self.log_level.upper()

        valid_environments = ["DEV", "PROD"]
        if self.environment.upper() not in valid_environments:
            self.environment = "PROD"
        self.environment = self.environment.upper()

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "DEV"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "PROD"


# Global settings instance
settings = Settings()
