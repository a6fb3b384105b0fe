"""Settings read from the environment with a .env fallback."""

from __future__ import annotations

import os
from pathlib import Path

_QUOTES = ('"', "'")


def read_env_file(keys: list[str]) -> dict[str, str]:
    """Return the requested keys from ./.env.

    Values are not copied into os.environ, so they never reach the
    external tools spawned by this package.
    """
    try:
        lines = (Path.cwd() / ".env").read_text().splitlines()
    except OSError:
        return {}

    wanted = set(keys)
    result: dict[str, str] = {}

    for line in lines:
        key, sep, value = line.strip().partition("=")
        key = key.strip()
        if not sep or key.startswith("#") or key not in wanted:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
            value = value[1:-1]
        if value:
            result[key] = value

    return result


def get_setting(name: str, default: str = "") -> str:
    """Look a setting up in os.environ first, then in .env."""
    return os.environ.get(name) or read_env_file([name]).get(name, default)


LOG_LEVEL: str = get_setting("LOG_LEVEL", "INFO").upper()
IBTOOL_BIN: str = get_setting("IBTOOL_BIN", "ibtool")
CODESIGN_BIN: str = get_setting("CODESIGN_BIN", "codesign")

CLANG_INCLUDE_FLAG = "-I"
