"""Shared pytest fixtures for the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from hostinfo.platform_utils import get_platform
from hostinfo.system_info import SystemInfo


def is_macos() -> bool:
    return get_platform() == "macos"


def is_linux() -> bool:
    return get_platform() == "linux"


def is_windows() -> bool:
    return get_platform() == "windows"


skip_if_not_macos = pytest.mark.skipif(not is_macos(), reason="macOS only")
skip_if_not_linux = pytest.mark.skipif(not is_linux(), reason="Linux only")
skip_on_windows = pytest.mark.skipif(is_windows(), reason="POSIX permissions only")


def make_info(**overrides: object) -> SystemInfo:
    """Fabricated Linux/CPython snapshot with selected facts replaced."""
    facts: dict[str, object] = {
        "os_name": "Linux",
        "os_version": "6.1.0-13-amd64",
        "os_arch": "x86_64",
        "runtime_name": "CPython",
        "runtime_version": "3.12.1",
        "runtime_vendor": "(main, Dec  8 2023, 05:40:51) [GCC 11.4.0]",
        "arch_data_model": "64",
    }
    facts.update(overrides)
    return SystemInfo(**facts)


@pytest.fixture
def info_factory() -> Callable[..., SystemInfo]:
    return make_info


@pytest.fixture
def linux_info() -> SystemInfo:
    return make_info()


@pytest.fixture
def mac_info() -> SystemInfo:
    return make_info(os_name="Darwin", os_version="14.2.1", os_arch="arm64")


@pytest.fixture
def windows_info() -> SystemInfo:
    return make_info(os_name="Windows", os_version="10.0", os_arch="AMD64")
