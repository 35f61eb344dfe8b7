"""Debug logging utilities for hostinfo."""

from __future__ import annotations

import os
import sys

DEBUG_ENV_VAR = "HOSTINFO_DEBUG"


def log_debug(message: str, *, level: str = "info") -> None:
    """
    Log a debug message to stderr when HOSTINFO_DEBUG is set.

    Uses stderr to avoid corrupting ``hostinfo --json`` output on stdout.
    """
    if not os.environ.get(DEBUG_ENV_VAR):
        return

    prefix = "[HostInfo]"
    if level in ("warn", "error"):
        text = f"{prefix} {level.upper()}: {message}"
    else:
        text = f"{prefix} {message}"

    print(text, file=sys.stderr)
