"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_config_dir() -> Path:
    """Find the bundled config directory.

    The package ships its default configuration next to the sources
    (src/valuecast/config). Falls back to relative Path("config") if the
    directory is missing.
    """
    # Start from this file: src/valuecast/core/config.py
    package_dir = Path(__file__).resolve().parent.parent
    candidate = package_dir / "config"
    if candidate.is_dir():
        return candidate

    # Fallback: relative path (works when CWD is project root)
    return Path("config")


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: VALUECAST_
    """

    model_config = SettingsConfigDict(
        env_prefix="VALUECAST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Configuration paths
    config_path: Path = Field(
        default_factory=_find_config_dir,
        description="Path to configuration files (date patterns)",
    )

    # Type names
    type_aliases: dict[str, str] = Field(
        default_factory=lambda: {"bool": "boolean", "int": "integer"},
        description="Type name aliases, applied before a type name is parsed",
    )

    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="console")  # 'json' or 'console'


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
