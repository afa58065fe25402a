"""Application configuration."""

import logging
import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


def default_data_dir() -> Path:
    """Return the per-user data directory for the tracker."""
    base = os.getenv("XDG_DATA_HOME")
    root = Path(base) if base else Path.home() / ".local" / "share"
    return root / "cali"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Field(default_factory=default_data_dir)
    data_file_name: str = "cali_data.json"
    log_level: str = "WARNING"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="CALI_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def data_file(self) -> Path:
        """Full path of the JSON data file."""
        return self.data_dir / self.data_file_name


def resolve_log_level(raw: str | None) -> int:
    """Map a level name to a logging level, defaulting to WARNING."""
    if raw is None:
        return logging.WARNING
    level = logging.getLevelName(raw.strip().upper())
    if isinstance(level, int):
        return level
    return logging.WARNING
