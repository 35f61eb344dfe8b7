"""
Immutable snapshot of host platform facts.

``SystemInfo`` holds the identity strings read from the environment once and
derives every platform flag from them. Build the real one with
``SystemInfo.from_environment()``; tests construct fabricated instances
directly.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from hostinfo import platform_utils
from hostinfo.config import HostInfoConfig
from hostinfo.debug import log_debug
from hostinfo.versions import (
    macos_major_version,
    macos_major_version_code,
    macos_minor_version_code,
    macos_version_code,
    version_at_least,
)

# Version numbers from https://learn.microsoft.com/windows/win32/sysinfo/operating-system-version
WINDOWS_RELEASES: dict[str, str] = {
    "win2k": "5.0",
    "winxp": "5.1",
    "win_vista": "6.0",
    "win7": "6.1",
    "win8": "6.2",
    "win10": "10.0",
}

MACOS_RELEASES: dict[str, str] = {
    "tiger": "10.4",
    "leopard": "10.5",
    "snow_leopard": "10.6",
    "lion": "10.7",
    "mountain_lion": "10.8",
    "mavericks": "10.9",
    "yosemite": "10.10",
    "el_capitan": "10.11",
    "sierra": "10.12",
    "high_sierra": "10.13",
    "mojave": "10.14",
    "catalina": "10.15",
    "big_sur": "11",
    "monterey": "12",
    "ventura": "13",
    "sonoma": "14",
    "sequoia": "15",
}

IDENTITY_FIELDS = (
    "os_name",
    "os_version",
    "os_arch",
    "runtime_name",
    "runtime_version",
    "runtime_vendor",
    "arch_data_model",
    "desktop",
    "wsl_version",
)

FLAG_NAMES = (
    "is_windows",
    "is_mac",
    "is_linux",
    "is_freebsd",
    "is_solaris",
    "is_os2",
    "is_unix",
    "is_cpython",
    "is_pypy",
    "is_graalpy",
    "is_ironpython",
    "is_jython",
    "is_conda_runtime",
    "is_apple_runtime",
    "is_xwindow",
    "is_kde",
    "is_wsl",
    "is_32bit",
    "is_64bit",
    "is_mac_intel64",
    "is_mac_arm64",
    "is_mac_system_menu",
    "is_file_system_case_sensitive",
    "are_symlinks_supported",
)


class SystemInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    os_name: str = Field(description="OS name as reported by platform.system()")
    os_version: str = Field(default="", description="OS version used for version gates")
    os_arch: str = Field(default="", description="CPU architecture, e.g. 'x86_64'")
    runtime_name: str = Field(default="", description="Interpreter implementation, e.g. 'CPython'")
    runtime_version: str = Field(default="", description="Interpreter version, e.g. '3.12.1'")
    runtime_vendor: str = Field(default="", description="Interpreter build/distributor line")
    arch_data_model: str | None = Field(
        default=None,
        description="Pointer width of the runtime, '32' or '64' (None when unknown)",
    )
    desktop: str = Field(default="", description="Desktop session name (XDG_CURRENT_DESKTOP)")
    kde_full_session: str = Field(default="", description="Raw KDE_FULL_SESSION value")
    screen_menu_bar: bool = Field(
        default=False,
        description="Aqua look-and-feel uses the screen menu bar",
    )
    case_sensitive_fs_override: bool | None = Field(
        default=None,
        description="Configured filesystem case sensitivity, if forced",
    )
    wsl_version: str | None = Field(default=None, description="'1' or '2' under WSL")

    @classmethod
    def from_environment(
        cls,
        config: HostInfoConfig | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> SystemInfo:
        """Read the host's facts, applying any configured overrides."""
        if environ is None:
            environ = os.environ
        if config is None:
            config = HostInfoConfig()

        facts: dict[str, object] = {
            "os_name": platform_utils.get_os_name(),
            "os_version": platform_utils.get_os_version(),
            "os_arch": platform_utils.get_os_arch(),
            "runtime_name": platform_utils.get_runtime_name(),
            "runtime_version": platform_utils.get_runtime_version(),
            "runtime_vendor": platform_utils.get_runtime_vendor(),
            "arch_data_model": platform_utils.get_arch_data_model(),
            "desktop": platform_utils.get_desktop(environ),
            "kde_full_session": environ.get("KDE_FULL_SESSION", ""),
            "screen_menu_bar": environ.get("APPLE_LAF_USE_SCREEN_MENU_BAR") == "true",
            "case_sensitive_fs_override": config.case_sensitive_fs,
            "wsl_version": platform_utils.get_wsl_version(),
        }

        overrides = config.overrides.model_dump(exclude_none=True)
        if overrides:
            log_debug(f"Applying fact overrides: {overrides}")
            facts.update(overrides)

        return cls.model_validate(facts)

    # OS family

    @property
    def _os_name_lower(self) -> str:
        return self.os_name.lower()

    @property
    def is_windows(self) -> bool:
        return self._os_name_lower.startswith("windows")

    @property
    def is_os2(self) -> bool:
        return self._os_name_lower.startswith(("os/2", "os2"))

    @property
    def is_mac(self) -> bool:
        return self._os_name_lower.startswith(("mac", "darwin"))

    @property
    def is_linux(self) -> bool:
        return self._os_name_lower.startswith("linux")

    @property
    def is_freebsd(self) -> bool:
        return self._os_name_lower.startswith("freebsd")

    @property
    def is_solaris(self) -> bool:
        return self._os_name_lower.startswith(("sunos", "solaris"))

    @property
    def is_unix(self) -> bool:
        return not self.is_windows and not self.is_os2

    # Runtime vendor

    def _runtime_name_contains(self, needle: str) -> bool:
        return needle in self.runtime_name.lower()

    @property
    def is_cpython(self) -> bool:
        return self._runtime_name_contains("cpython")

    @property
    def is_pypy(self) -> bool:
        return self._runtime_name_contains("pypy")

    @property
    def is_graalpy(self) -> bool:
        return self._runtime_name_contains("graal")

    @property
    def is_ironpython(self) -> bool:
        return self._runtime_name_contains("ironpython")

    @property
    def is_jython(self) -> bool:
        return self._runtime_name_contains("jython")

    @property
    def is_conda_runtime(self) -> bool:
        vendor = self.runtime_vendor.lower()
        return "conda" in vendor or "anaconda" in vendor

    @property
    def is_apple_runtime(self) -> bool:
        return "apple" in self.runtime_vendor.lower()

    # Desktop

    @property
    def is_xwindow(self) -> bool:
        return self.is_unix and not self.is_mac

    @property
    def is_kde(self) -> bool:
        return bool(self.kde_full_session)

    @property
    def is_wsl(self) -> bool:
        return self.wsl_version is not None

    # Architecture

    @property
    def is_32bit(self) -> bool:
        return self.arch_data_model is None or self.arch_data_model == "32"

    @property
    def is_64bit(self) -> bool:
        return not self.is_32bit

    @property
    def is_mac_intel64(self) -> bool:
        return self.is_mac and self.os_arch == "x86_64"

    @property
    def is_mac_arm64(self) -> bool:
        return self.is_mac and self.os_arch == "arm64"

    @property
    def is_mac_system_menu(self) -> bool:
        return self.is_mac and self.screen_menu_bar

    # Filesystem

    @property
    def is_file_system_case_sensitive(self) -> bool:
        if self.case_sensitive_fs_override is not None:
            return self.case_sensitive_fs_override
        return self.is_unix and not self.is_mac

    @property
    def are_symlinks_supported(self) -> bool:
        return self.is_unix or self.is_win_vista_or_newer

    # Version gates

    def os_version_at_least(self, version: str) -> bool:
        return version_at_least(self.os_version, version)

    def runtime_version_at_least(self, version: str) -> bool:
        return version_at_least(self.runtime_version, version)

    def windows_at_least(self, release: str) -> bool:
        """True on Windows at or above a named release from WINDOWS_RELEASES."""
        return self.is_windows and self.os_version_at_least(WINDOWS_RELEASES[release])

    def macos_at_least(self, release: str) -> bool:
        """True on macOS at or above a named release from MACOS_RELEASES."""
        return self.is_mac and self.os_version_at_least(MACOS_RELEASES[release])

    @property
    def is_win2k_or_newer(self) -> bool:
        return self.windows_at_least("win2k")

    @property
    def is_winxp_or_newer(self) -> bool:
        return self.windows_at_least("winxp")

    @property
    def is_win_vista_or_newer(self) -> bool:
        return self.windows_at_least("win_vista")

    @property
    def is_win7_or_newer(self) -> bool:
        return self.windows_at_least("win7")

    @property
    def is_win8_or_newer(self) -> bool:
        return self.windows_at_least("win8")

    @property
    def is_win10_or_newer(self) -> bool:
        return self.windows_at_least("win10")

    @property
    def is_macos_tiger(self) -> bool:
        return self.macos_at_least("tiger")

    @property
    def is_macos_leopard(self) -> bool:
        return self.macos_at_least("leopard")

    @property
    def is_macos_snow_leopard(self) -> bool:
        return self.macos_at_least("snow_leopard")

    @property
    def is_macos_lion(self) -> bool:
        return self.macos_at_least("lion")

    @property
    def is_macos_mountain_lion(self) -> bool:
        return self.macos_at_least("mountain_lion")

    @property
    def is_macos_mavericks(self) -> bool:
        return self.macos_at_least("mavericks")

    @property
    def is_macos_yosemite(self) -> bool:
        return self.macos_at_least("yosemite")

    @property
    def is_macos_el_capitan(self) -> bool:
        return self.macos_at_least("el_capitan")

    @property
    def is_macos_sierra(self) -> bool:
        return self.macos_at_least("sierra")

    @property
    def is_macos_high_sierra(self) -> bool:
        return self.macos_at_least("high_sierra")

    @property
    def is_macos_mojave(self) -> bool:
        return self.macos_at_least("mojave")

    @property
    def is_macos_catalina(self) -> bool:
        return self.macos_at_least("catalina")

    @property
    def is_macos_big_sur(self) -> bool:
        return self.macos_at_least("big_sur")

    @property
    def is_macos_monterey(self) -> bool:
        return self.macos_at_least("monterey")

    @property
    def is_macos_ventura(self) -> bool:
        return self.macos_at_least("ventura")

    @property
    def is_macos_sonoma(self) -> bool:
        return self.macos_at_least("sonoma")

    @property
    def is_macos_sequoia(self) -> bool:
        return self.macos_at_least("sequoia")

    # macOS version codes

    def macos_version_code(self) -> str:
        return macos_version_code(self.os_version)

    def macos_major_version_code(self) -> str:
        return macos_major_version_code(self.os_version)

    def macos_minor_version_code(self) -> str:
        return macos_minor_version_code(self.os_version)

    def macos_major_version(self) -> str:
        return macos_major_version(self.os_version)

    def as_facts(self) -> dict[str, object]:
        """Identity strings plus every derived flag, for display."""
        facts: dict[str, object] = {name: getattr(self, name) for name in IDENTITY_FIELDS}
        for name in FLAG_NAMES:
            facts[name] = getattr(self, name)
        for release in WINDOWS_RELEASES:
            facts[f"is_{release}_or_newer"] = self.windows_at_least(release)
        for release in MACOS_RELEASES:
            facts[f"is_macos_{release}"] = self.macos_at_least(release)
        return facts
