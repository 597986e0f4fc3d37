"""Core configuration.

Environment variables (prefix `PASTERY_`) and `.env` files are read through
pydantic-settings, so the CLI receives one typed settings object instead of
poking at `os.environ` itself.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

API_URL = "https://www.pastery.net/api/paste/"
API_KEY_ENV_VAR = "PASTERY_API_KEY"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "patisserie"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "patisserie"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "patisserie"
    return Path.home() / ".config" / "patisserie"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    `api_key` is read from `PASTERY_API_KEY`; the command line takes
    precedence over it.
    """

    model_config = SettingsConfigDict(
        env_prefix="PASTERY_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first, then the per-user one.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        description="pastery.net API key (https://www.pastery.net/account/).",
    )
    api_url: str = Field(
        default=API_URL,
        min_length=8,
        description="Paste creation endpoint.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for the upload request (seconds).",
    )
    user_agent: str = Field(
        default="patisserie/0.1 (+https://www.pastery.net)",
        min_length=1,
        description="User-Agent sent with the upload.",
    )
