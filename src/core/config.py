"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting the CLI.
- Lets adapters (email checks, logging) read configuration consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "signup-api"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "signup-api"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "signup-api"
    return Path.home() / ".config" / "signup-api"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without leaking into the Core.
    - One configuration contract shared by the CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="SIGNUP_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level (CRITICAL, ERROR, WARNING, INFO, DEBUG).",
    )
    email_check_deliverability: bool = Field(
        default=False,
        description="Resolve the email domain (DNS) when validating addresses.",
    )
    email_allow_smtputf8: bool = Field(
        default=True,
        description="Accept internationalized local parts (SMTPUTF8).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level
