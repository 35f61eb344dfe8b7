"""
Configuration models for hostinfo.

Settings are optional: every field has a default matching the real host, and
a missing or invalid settings file means "use the defaults".
"""

from __future__ import annotations

import json
import os
import re
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from hostinfo.debug import log_debug

SETTINGS_ENV_VAR = "HOSTINFO_SETTINGS"


class FactOverrides(BaseModel):
    """Identity facts to report instead of the detected ones."""

    os_name: str | None = Field(default=None, description="Replaces platform.system()")
    os_version: str | None = Field(default=None, description="Replaces the detected OS version")
    os_arch: str | None = Field(default=None, description="Replaces platform.machine()")
    arch_data_model: Literal["32", "64"] | None = Field(
        default=None,
        description="Pointer width of the runtime, '32' or '64'",
    )
    desktop: str | None = Field(default=None, description="Replaces XDG_CURRENT_DESKTOP")

    @field_validator("os_name", "os_version", mode="before")
    @classmethod
    def validate_nonblank(cls, v: str | None) -> str | None:
        if v is not None and not str(v).strip():
            raise ValueError("Overridden OS facts must not be blank")
        return v


class HostInfoConfig(BaseModel):
    os_release_path: str = Field(
        default="/etc/os-release",
        min_length=1,
        description="Release-info file read on non-mac Unix systems",
    )
    executable_dir: str = Field(
        default="/usr/bin",
        min_length=1,
        description="Directory probed for xdg-open and xdg-mime",
    )
    case_sensitive_fs: bool | None = Field(
        default=None,
        description="Force filesystem case sensitivity (default: derived from the OS)",
    )
    overrides: FactOverrides = Field(
        default_factory=FactOverrides,
        description="Identity facts to report instead of the detected ones",
    )


def default_config_path() -> Path:
    env_path = os.environ.get(SETTINGS_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.home() / ".hostinfo-settings.json"


def load_config(config_path: str | Path) -> HostInfoConfig | None:
    """Load configuration from a JSON file, returning None if not found."""
    path = Path(config_path).expanduser()
    try:
        if not path.exists():
            return None
        data = json.loads(path.read_text(encoding="utf-8"))
        return _parse_config_dict(data)
    except (json.JSONDecodeError, Exception) as e:
        log_debug(f"Ignoring settings file {path}: {e}", level="warn")
        return None


def load_config_from_string(raw: str) -> HostInfoConfig | None:
    """Parse configuration from a JSON string."""
    try:
        data = json.loads(raw)
        return _parse_config_dict(data)
    except (json.JSONDecodeError, Exception) as e:
        log_debug(f"Ignoring settings string: {e}", level="warn")
        return None


_CAMEL_RE = re.compile(r"([a-z0-9])([A-Z])")


def _camel_to_snake(name: str) -> str:
    return _CAMEL_RE.sub(r"\1_\2", name).lower()


def _normalize_keys(obj: object) -> object:
    """Recursively convert camelCase keys to snake_case."""
    if isinstance(obj, dict):
        return {_camel_to_snake(k): _normalize_keys(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_normalize_keys(item) for item in obj]
    return obj


def _parse_config_dict(data: dict) -> HostInfoConfig:
    normalized = _normalize_keys(data)
    return HostInfoConfig.model_validate(normalized)
