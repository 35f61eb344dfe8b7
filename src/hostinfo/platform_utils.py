"""Raw readers for the facts the host platform exposes."""

from __future__ import annotations

import platform
import struct
import sys
from collections.abc import Mapping
from typing import Literal

Platform = Literal["macos", "linux", "windows", "unknown"]


def get_platform() -> Platform:
    """Detect the current OS platform."""
    system = platform.system().lower()
    if system == "darwin":
        return "macos"
    if system == "linux":
        return "linux"
    if system == "windows":
        return "windows"
    return "unknown"


def get_os_name() -> str:
    return platform.system()


def get_os_version() -> str:
    """
    Return the OS version in the form version gates compare against.

    macOS reports its product version (``14.2.1``) rather than the Darwin
    kernel release, and Windows reports ``major.minor`` of the NT version.
    """
    p = get_platform()
    if p == "macos":
        mac_version = platform.mac_ver()[0]
        if mac_version:
            return mac_version
    elif p == "windows":
        parts = platform.version().split(".")
        if len(parts) >= 2:
            return ".".join(parts[:2])
    return platform.release()


def get_os_arch() -> str:
    return platform.machine()


def get_arch_data_model() -> str | None:
    """Pointer width of the running interpreter: '32', '64', or None."""
    try:
        bits = struct.calcsize("P") * 8
    except struct.error:
        return None
    if bits in (32, 64):
        return str(bits)
    return None


def get_runtime_name() -> str:
    return platform.python_implementation()


def get_runtime_version() -> str:
    return platform.python_version()


def get_runtime_vendor() -> str:
    """Build line of the interpreter, e.g. ``"| packaged by conda-forge | [GCC 12.3.0]"``."""
    _, _, build = sys.version.partition(" ")
    return build.strip()


def get_desktop(environ: Mapping[str, str]) -> str:
    return environ.get("XDG_CURRENT_DESKTOP") or environ.get("DESKTOP_SESSION") or ""


def get_wsl_version() -> str | None:
    """Detect WSL version on Linux. Returns '1', '2', or None if not WSL."""
    if get_platform() != "linux":
        return None

    try:
        with open("/proc/version", encoding="utf-8") as f:
            version_info = f.read().lower()
    except OSError:
        return None

    if "microsoft" not in version_info:
        return None

    if "wsl2" in version_info or "microsoft-standard" in version_info:
        return "2"
    return "1"
