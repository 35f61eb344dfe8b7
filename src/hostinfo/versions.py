"""
Version string helpers.

All helpers are pure and total: malformed input degrades to zero components
instead of raising.
"""

from __future__ import annotations


def _to_int(segment: str) -> int:
    # Plain ASCII integers only: no "1_5", no padding, no non-ASCII digits
    digits = segment[1:] if segment[:1] in ("+", "-") else segment
    if not (digits.isascii() and digits.isdigit()):
        return 0
    return int(segment)


def compare_version_numbers(v1: str | None, v2: str | None) -> int:
    """
    Compare two dotted version strings numerically.

    Missing trailing segments count as ``0`` and segments that are not plain
    integers count as ``0``, so ``"10.10"`` and ``"10.10.0"`` are equal.
    ``None`` sorts before any string. Returns -1, 0 or 1.
    """
    if v1 is None and v2 is None:
        return 0
    if v1 is None:
        return -1
    if v2 is None:
        return 1

    parts1 = [_to_int(p) for p in v1.split(".")]
    parts2 = [_to_int(p) for p in v2.split(".")]
    width = max(len(parts1), len(parts2))
    parts1 += [0] * (width - len(parts1))
    parts2 += [0] * (width - len(parts2))

    for a, b in zip(parts1, parts2):
        if a != b:
            return -1 if a < b else 1
    return 0


def version_at_least(actual: str | None, required: str) -> bool:
    return compare_version_numbers(actual, required) >= 0


def macos_version_parts(version: str) -> tuple[int, int, int]:
    """Split a macOS version into exactly (major, minor, patch)."""
    parts = [p for p in version.split(".") if p] if version else []
    parts += ["0"] * (3 - len(parts))
    return _to_int(parts[0]), _to_int(parts[1]), _to_int(parts[2])


def _clamp_digit(number: int) -> int:
    return 9 if number > 9 else number


def macos_version_code(version: str) -> str:
    """Encode ``major.minor.patch`` as e.g. ``"1095"`` for ``10.9.5``."""
    major, minor, patch = macos_version_parts(version)
    return f"{major:02d}{_clamp_digit(minor)}{_clamp_digit(patch)}"


def macos_major_version_code(version: str) -> str:
    """Like :func:`macos_version_code` with the patch slot always ``0``."""
    major, minor, _ = macos_version_parts(version)
    return f"{major:02d}{_clamp_digit(minor)}0"


def macos_minor_version_code(version: str) -> str:
    """Encode minor and patch as two two-digit fields, e.g. ``"0905"``."""
    _, minor, patch = macos_version_parts(version)
    return f"{minor:02d}{patch:02d}"


def macos_major_version(version: str) -> str:
    major, minor, _ = macos_version_parts(version)
    return f"{major}.{minor}"
