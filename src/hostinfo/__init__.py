"""
py-hostinfo: host platform facts

Read-only facts about the operating system and Python runtime, plus version
gates ("is this macOS at least Big Sur") for platform-conditional code.
"""

from __future__ import annotations

__version__ = "0.1.0"

import threading

from hostinfo.config import HostInfoConfig, default_config_path, load_config
from hostinfo.debug import log_debug
from hostinfo.probes import HostProbes
from hostinfo.system_info import SystemInfo

_system_info: SystemInfo | None = None
_host_probes: HostProbes | None = None
_lock = threading.Lock()


def _load_default_config() -> HostInfoConfig:
    try:
        path = default_config_path()
    except (OSError, RuntimeError, KeyError) as e:
        log_debug(f"Cannot locate settings file: {e}", level="warn")
        return HostInfoConfig()
    return load_config(path) or HostInfoConfig()


def _ensure_initialized() -> None:
    global _system_info, _host_probes

    if _host_probes is None:
        with _lock:
            # Double-check locking pattern
            if _host_probes is None:
                config = _load_default_config()
                _system_info = SystemInfo.from_environment(config)
                _host_probes = HostProbes(_system_info, config)


def get_system_info() -> SystemInfo:
    """Get the process-wide snapshot, reading the host on first use."""
    _ensure_initialized()
    assert _system_info is not None
    return _system_info


def get_host_probes() -> HostProbes:
    """Get the process-wide probes bound to :func:`get_system_info`."""
    _ensure_initialized()
    assert _host_probes is not None
    return _host_probes


def is_os_version_at_least(version: str) -> bool:
    return get_system_info().os_version_at_least(version)


def is_runtime_version_at_least(version: str) -> bool:
    return get_system_info().runtime_version_at_least(version)


def get_unix_release_name() -> str | None:
    return get_host_probes().unix_release_name()


def get_unix_release_version() -> str | None:
    return get_host_probes().unix_release_version()


def has_xdg_open() -> bool:
    return get_host_probes().has_xdg_open()


def has_xdg_mime() -> bool:
    return get_host_probes().has_xdg_mime()


__all__ = [
    "__version__",
    "HostInfoConfig",
    "HostProbes",
    "SystemInfo",
    "get_host_probes",
    "get_system_info",
    "get_unix_release_name",
    "get_unix_release_version",
    "has_xdg_mime",
    "has_xdg_open",
    "is_os_version_at_least",
    "is_runtime_version_at_least",
]
