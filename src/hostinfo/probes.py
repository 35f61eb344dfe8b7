"""
Lazy filesystem probes: release-info parsing and optional executables.

Each probe runs at most once per ``HostProbes`` and its result, including a
failed lookup, is kept for the life of the process.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from hostinfo.config import HostInfoConfig
from hostinfo.debug import log_debug
from hostinfo.lazy import Memoized
from hostinfo.system_info import SystemInfo

OPTIONAL_EXECUTABLES = ("xdg-open", "xdg-mime")


def unquote(value: str) -> str:
    """Strip one pair of matching single or double quotes."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def parse_os_release(text: str) -> dict[str, str]:
    """
    Parse ``KEY=value`` lines of an os-release file.

    Lines without ``=`` (or starting with one) are skipped, as are pairs whose
    key or trimmed, unquoted value is blank.
    See https://www.freedesktop.org/software/systemd/man/os-release.html
    """
    info: dict[str, str] = {}
    for line in text.splitlines():
        p = line.find("=")
        if p <= 0:
            continue
        name = line[:p]
        value = unquote(line[p + 1 :].strip())
        if name.strip() and value.strip():
            info[name] = value
    return info


def is_executable_file(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


class HostProbes:
    """Memoized probes bound to one ``SystemInfo`` snapshot."""

    def __init__(self, info: SystemInfo, config: HostInfoConfig | None = None) -> None:
        self._info = info
        self._config = config or HostInfoConfig()
        self._os_release: Memoized[dict[str, str]] = Memoized(self._read_os_release)
        self._executables: dict[str, Memoized[bool]] = {
            name: Memoized(self._executable_probe(name)) for name in OPTIONAL_EXECUTABLES
        }

    @property
    def info(self) -> SystemInfo:
        return self._info

    def _read_os_release(self) -> dict[str, str]:
        if not self._info.is_unix or self._info.is_mac:
            return {}

        path = Path(self._config.os_release_path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            log_debug(f"Cannot read {path}: {e}")
            return {}

        info = parse_os_release(text)
        log_debug(f"Read {len(info)} entries from {path}")
        return info

    def _executable_probe(self, name: str) -> Callable[[], bool]:
        path = Path(self._config.executable_dir) / name

        def probe() -> bool:
            try:
                found = is_executable_file(path)
            except OSError as e:
                log_debug(f"Cannot probe {path}: {e}")
                return False
            log_debug(f"{path} executable: {found}")
            return found

        return probe

    def os_release(self) -> dict[str, str]:
        """Release-info key/value pairs; empty off non-mac Unix or on failure."""
        return dict(self._os_release.get())

    def unix_release_name(self) -> str | None:
        return self._os_release.get().get("NAME")

    def unix_release_version(self) -> str | None:
        return self._os_release.get().get("VERSION")

    def unix_release_id(self) -> str | None:
        return self._os_release.get().get("ID")

    def has_optional_executable(self, name: str) -> bool:
        """
        Check for ``xdg-open`` or ``xdg-mime`` on X11-based Unix systems.

        Off X11 this returns False without touching the filesystem.
        """
        cell = self._executables.get(name)
        if cell is None:
            log_debug(f"Unknown optional executable: {name}", level="warn")
            return False
        return self._info.is_xwindow and cell.get()

    def has_xdg_open(self) -> bool:
        return self.has_optional_executable("xdg-open")

    def has_xdg_mime(self) -> bool:
        return self.has_optional_executable("xdg-mime")
