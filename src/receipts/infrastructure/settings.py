"""Centralized configuration using pydantic-settings.

Every setting can be overridden with a ``RECEIPTS_``-prefixed environment
variable (e.g. ``RECEIPTS_STORE_NAME``) or in a ``.env`` file.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="RECEIPTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    data_dir: Path = Field(Path("data"), description="Directory holding the JSON data files")
    transient_files_dir: Path | None = Field(
        None, description="Receipt files directory, defaults to <data_dir>/transient-files"
    )
    store_name: str = Field("", description="Store name shown in receipt titles")
    locale: str = Field("en_US", description="Locale for money and date formatting")
    default_expiration_days: int = Field(
        1, ge=1, description="Days a new receipt file stays available by default"
    )
    log_level: str = Field("INFO", description="Log level")
    log_format: LogFormat = Field(LogFormat.CONSOLE, description="Log output format")

    @property
    def resolved_transient_files_dir(self) -> Path:
        return self.transient_files_dir or self.data_dir / "transient-files"


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get global settings instance (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (mainly for testing)."""
    global _settings
    _settings = None
