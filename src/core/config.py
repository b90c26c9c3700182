"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them
  into the CLI.
- Lets adapters (codecs, file store) read config consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.formats import Format


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "zoo-store"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "zoo-store"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "zoo-store"
    return Path.home() / ".config" / "zoo-store"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing and validation at the edge (env vars) without polluting the Core.
    - A single configuration contract for the CLI and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="ZOO_STORE_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    default_format: Format = Field(
        default=Format.JSON,
        description="Format used when neither a flag nor a file suffix decides.",
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentation for the JSON codec (0 keeps one key per line).",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Root log level for the CLI (DEBUG, INFO, WARNING, ...).",
    )
