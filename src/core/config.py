"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into the CLI.
- Lets adapters (HTTP, process runner) and services read config consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "arch-box"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "arch-box"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "arch-box"
    return Path.home() / ".config" / "arch-box"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without polluting the core.
    - A single configuration contract for CLI, services and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="ARCH_BOX_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    mirrorlist_url: str = Field(
        default="https://archlinux.org/mirrorlist/",
        min_length=8,
        description="Mirror directory service queried by country.",
    )
    default_mirror: str = Field(
        default="https://mirrors.kernel.org/archlinux",
        min_length=8,
        description="Mirror used when no country is given (skips the lookup).",
    )
    default_country: str = Field(
        default="US",
        min_length=2,
        max_length=2,
        description="Country reported to the template when no country is given.",
    )

    iso_path: str = Field(
        default="iso/latest",
        min_length=1,
        description="Path under the mirror where the current release lives.",
    )
    manifest_name: str = Field(
        default="sha256sums.txt",
        min_length=1,
        description="Checksum manifest filename published next to the ISO.",
    )
    iso_extension: str = Field(
        default="iso",
        min_length=1,
        description="Installer media extension matched in the manifest.",
    )

    template_path: str = Field(
        default="arch-template.json",
        min_length=1,
        description="Builder template handed to the external tool.",
    )
    builder_binary: str = Field(
        default="packer",
        min_length=1,
        description="Name or path of the external image builder.",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="arch-box/0.1 (+https://archlinux.org)",
        min_length=1,
        description="User-Agent for mirror lookups.",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level
