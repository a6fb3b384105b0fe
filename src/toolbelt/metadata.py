"""Package name and version helpers."""

from __future__ import annotations

import re
from importlib.metadata import version as dist_version

DIST_NAME = "toolbelt"

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)(?:-([0-9A-Za-z.-]+))?")


def packed_version(version: str | None = None) -> int:
    """Pack a major.minor.patch[-pre] version into a single integer.

    Bit layout: 3 bits major, 4 bits minor, 4 bits patch, 9 bits
    pre-release number. Fields are masked, not range-checked.
    """
    if version is None:
        version = dist_version(DIST_NAME)

    match = _VERSION_RE.match(version)
    if not match:
        raise ValueError(f"Invalid version: {version!r}")

    major, minor, patch = (int(part) for part in match.group(1, 2, 3))
    # Only a purely numeric pre-release ("1.2.3-4") is packed; "rc.1" counts as 0.
    pre_release = match.group(4) or ""
    pre = int(pre_release) if pre_release.isdigit() else 0

    return ((major & 7) << 19) | ((minor & 15) << 15) | ((patch & 15) << 11) | (pre & 511)


def to_title_case(name: str) -> str:
    """Turn a distribution name like ``my-app_name`` into ``My App Name``."""
    words = re.split(r"[\s_\-.]+|(?<=[a-z0-9])(?=[A-Z])", name)
    return " ".join(word.capitalize() for word in words if word)


def get_package_name(dist_name: str = DIST_NAME, with_version: bool = False) -> str:
    """Return the title-cased distribution name, optionally with its version."""
    name = to_title_case(dist_name)
    if with_version:
        name += " " + dist_version(dist_name)
    return name
