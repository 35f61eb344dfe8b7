"""Tests for the CLI entrypoint."""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest


def _run_hostinfo(args: list[str], *, debug: bool = False) -> subprocess.CompletedProcess:
    """Run the hostinfo CLI and capture output."""
    env = {**os.environ}
    env["HOME"] = "/tmp/cli-test-nonexistent"
    env.pop("HOSTINFO_SETTINGS", None)
    env.pop("HOSTINFO_DEBUG", None)
    if debug:
        env["HOSTINFO_DEBUG"] = "1"

    return subprocess.run(
        [sys.executable, "-m", "hostinfo.cli", *args],
        capture_output=True,
        text=True,
        env=env,
        timeout=30,
    )


@pytest.fixture
def mac_settings(tmp_path: Path) -> str:
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "osReleasePath": str(tmp_path / "os-release"),
                "overrides": {"osName": "Darwin", "osVersion": "10.15.7", "osArch": "x86_64"},
            }
        ),
        encoding="utf-8",
    )
    return str(path)


@pytest.fixture
def linux_settings(tmp_path: Path) -> str:
    (tmp_path / "os-release").write_text('NAME="Ubuntu"\nVERSION="22.04"\n', encoding="utf-8")
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "osReleasePath": str(tmp_path / "os-release"),
                "executableDir": str(tmp_path),
                "overrides": {"osName": "Linux", "osVersion": "6.1.0"},
            }
        ),
        encoding="utf-8",
    )
    return str(path)


class TestFacts:
    def test_prints_facts(self):
        result = _run_hostinfo([])
        assert result.returncode == 0
        assert "os_name: " in result.stdout
        assert "is_64bit: " in result.stdout

    def test_json_output(self, mac_settings: str):
        result = _run_hostinfo(["--json", "-s", mac_settings])
        assert result.returncode == 0
        facts = json.loads(result.stdout)
        assert facts["os_name"] == "Darwin"
        assert facts["is_mac"] is True
        assert facts["is_mac_intel64"] is True
        assert facts["is_macos_catalina"] is True
        assert facts["is_macos_big_sur"] is False

    def test_release_info(self, linux_settings: str):
        result = _run_hostinfo(["--json", "--release", "-s", linux_settings])
        assert result.returncode == 0
        facts = json.loads(result.stdout)
        assert facts["unix_release_name"] == "Ubuntu"
        assert facts["unix_release_version"] == "22.04"
        assert facts["has_xdg_open"] is False

    def test_release_info_off_unix(self, mac_settings: str):
        result = _run_hostinfo(["--json", "--release", "-s", mac_settings])
        facts = json.loads(result.stdout)
        assert facts["unix_release_name"] is None

    def test_missing_settings_falls_back(self):
        result = _run_hostinfo(["--json", "-s", "/nonexistent/settings.json"])
        assert result.returncode == 0
        assert "os_name" in json.loads(result.stdout)


class TestVersionGates:
    def test_os_gate_passes(self, mac_settings: str):
        result = _run_hostinfo(["-s", mac_settings, "--os-at-least", "10.10"])
        assert result.returncode == 0
        assert result.stdout.strip() == "os>=10.10: true"

    def test_os_gate_fails(self, mac_settings: str):
        result = _run_hostinfo(["-s", mac_settings, "--os-at-least", "11"])
        assert result.returncode == 1
        assert result.stdout.strip() == "os>=11: false"

    def test_all_gates_must_hold(self, mac_settings: str):
        result = _run_hostinfo(
            ["-s", mac_settings, "--os-at-least", "10.4", "--os-at-least", "12", "--json"]
        )
        assert result.returncode == 1
        assert json.loads(result.stdout) == {"os>=10.4": True, "os>=12": False}

    def test_runtime_gate(self):
        current = ".".join(str(p) for p in sys.version_info[:2])
        result = _run_hostinfo(["--runtime-at-least", current])
        assert result.returncode == 0

        result = _run_hostinfo(["--runtime-at-least", "99"])
        assert result.returncode == 1


class TestDebugAndVersion:
    def test_debug_goes_to_stderr(self, mac_settings: str):
        result = _run_hostinfo(["--json", "-d", "-s", mac_settings])
        assert result.returncode == 0
        assert "[HostInfo]" in result.stderr
        json.loads(result.stdout)

    def test_debug_env_var(self, mac_settings: str):
        result = _run_hostinfo(["--json", "-s", mac_settings], debug=True)
        assert result.returncode == 0
        assert "[HostInfo]" in result.stderr

    def test_no_debug_output_by_default(self):
        result = _run_hostinfo(["--json"])
        assert "[HostInfo]" not in result.stderr

    def test_version_option(self):
        result = _run_hostinfo(["--version"])
        assert result.returncode == 0
        assert "hostinfo" in result.stdout
