"""Expansion of SDK header directory globs into include paths."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import TYPE_CHECKING

from toolbelt.config import CLANG_INCLUDE_FLAG
from toolbelt.globbing import INCLUDE_FLAGS, iter_matches
from toolbelt.logger import logger
from toolbelt.types import IncludeDirFormat

if TYPE_CHECKING:
    from collections.abc import Iterable

    from structlog.typing import FilteringBoundLogger


def format_include_dir(path: Path, fmt: IncludeDirFormat) -> str:
    """Render a single include directory in the requested format."""
    if fmt is IncludeDirFormat.CLANG:
        return f"{CLANG_INCLUDE_FLAG}{path}"
    return str(path)


def get_sdk_include_dirs(
    patterns: Iterable[object],
    sdk_root: str | os.PathLike[str],
    fmt: IncludeDirFormat = IncludeDirFormat.PLAIN,
    *,
    log: FilteringBoundLogger | None = None,
) -> list[str]:
    """Return the include directories matched by patterns below sdk_root.

    Each pattern is appended to sdk_root as a plain string, so the caller
    controls the separator (``"/sdk/" + "headers/**"``). Results keep
    pattern order, then match order; duplicates are kept.
    A trailing ``**`` lists directories only, so header files below it
    never show up as include directories. Matches that cannot be stat'ed
    are logged and skipped.
    """
    log = log or logger
    sdk = Path(sdk_root)
    include_dirs: list[str] = []

    for pattern in patterns:
        expression = f"{os.fspath(sdk_root)}{pattern}"
        dirs_only = expression.rstrip("/\\").endswith("**")
        for match in iter_matches(expression, INCLUDE_FLAGS):
            try:
                st = os.stat(match)
            except OSError as e:
                log.warning("Skipping unreadable include match", path=match, error=str(e))
                continue
            if dirs_only and not stat.S_ISDIR(st.st_mode):
                continue
            include_path = sdk / match
            include_dirs.append(format_include_dir(include_path, fmt))

    log.debug("Expanded SDK include dirs", sdk=str(sdk), count=len(include_dirs))
    return include_dirs
