"""
CLI entrypoint for py-hostinfo.

Prints the host's platform facts, or answers version gates through the exit
status so shell scripts can branch on them.
"""

from __future__ import annotations

import json
import os
import sys

import click

from hostinfo import __version__
from hostinfo.config import HostInfoConfig, default_config_path, load_config
from hostinfo.debug import DEBUG_ENV_VAR, log_debug
from hostinfo.probes import HostProbes
from hostinfo.system_info import SystemInfo


def _load(settings_path: str | None) -> HostProbes:
    config_path = settings_path or str(default_config_path())
    config = load_config(config_path)

    if config is None:
        log_debug(f"No config found at {config_path}, using default config")
        config = HostInfoConfig()

    info = SystemInfo.from_environment(config)
    return HostProbes(info, config)


def _format_value(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@click.command()
@click.option("-d", "--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "-s",
    "--settings",
    type=click.Path(),
    default=None,
    help="Path to config file (default: ~/.hostinfo-settings.json)",
)
@click.option("--json", "as_json", is_flag=True, help="Print facts as JSON")
@click.option("--release", is_flag=True, help="Include os-release and xdg probe results")
@click.option(
    "--os-at-least",
    "os_versions",
    multiple=True,
    metavar="VERSION",
    help="Exit 0 only if the OS version is at least VERSION",
)
@click.option(
    "--runtime-at-least",
    "runtime_versions",
    multiple=True,
    metavar="VERSION",
    help="Exit 0 only if the Python version is at least VERSION",
)
@click.version_option(version=__version__, prog_name="hostinfo")
def main(
    debug: bool,
    settings: str | None,
    as_json: bool,
    release: bool,
    os_versions: tuple[str, ...],
    runtime_versions: tuple[str, ...],
) -> None:
    """Report facts about the host operating system and Python runtime."""
    if debug:
        os.environ[DEBUG_ENV_VAR] = "1"

    probes = _load(settings)
    info = probes.info

    if os_versions or runtime_versions:
        gates: dict[str, bool] = {}
        for v in os_versions:
            gates[f"os>={v}"] = info.os_version_at_least(v)
        for v in runtime_versions:
            gates[f"runtime>={v}"] = info.runtime_version_at_least(v)

        if as_json:
            click.echo(json.dumps(gates, indent=2))
        else:
            for name, ok in gates.items():
                click.echo(f"{name}: {_format_value(ok)}")
        sys.exit(0 if all(gates.values()) else 1)

    facts = info.as_facts()
    if release:
        facts["unix_release_name"] = probes.unix_release_name()
        facts["unix_release_version"] = probes.unix_release_version()
        facts["has_xdg_open"] = probes.has_xdg_open()
        facts["has_xdg_mime"] = probes.has_xdg_mime()

    if as_json:
        click.echo(json.dumps(facts, indent=2))
    else:
        for name, value in facts.items():
            click.echo(f"{name}: {_format_value(value)}")


if __name__ == "__main__":
    main()
