"""Filesystem utilities for packaging workflows."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import TYPE_CHECKING

from toolbelt.globbing import COPY_FLAGS, iter_matches
from toolbelt.logger import logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def _contained_subpath(root: Path, match: str) -> Path | None:
    """Return the match relative to root, or None when it escapes root."""
    full = Path(os.path.normpath(root / match))
    try:
        return full.relative_to(root)
    except ValueError:
        return None


def copy_dir_with_pattern(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
    pattern: str,
    *,
    log: FilteringBoundLogger | None = None,
) -> list[Path]:
    """Copy the files below source that match pattern into destination.

    The directory structure of every matched file relative to source is
    recreated under destination. Existing destination files are
    overwritten. A pattern without a slash (``*.{txt,csv}``) matches at
    any depth; use ``**`` explicitly otherwise.

    Raises FileNotFoundError before anything is created when source does
    not exist. The first OSError from creating a directory or copying a
    file stops the copy and propagates.

    Returns the destination paths that were written, in copy order.
    """
    log = log or logger
    source_root = Path(source).resolve(strict=True)
    destination_root = Path(destination)

    created: set[Path] = set()
    copied: list[Path] = []

    for match in iter_matches(pattern, COPY_FLAGS, root_dir=source_root):
        sub_path = _contained_subpath(source_root, match)
        if sub_path is None:
            log.debug("Skipping match outside source", match=match, source=str(source_root))
            continue

        target_dir = destination_root / sub_path.parent
        if target_dir not in created:
            created.add(target_dir)
            if not target_dir.exists():
                target_dir.mkdir(parents=True, exist_ok=True)

        target = target_dir / sub_path.name
        shutil.copy2(source_root / sub_path, target)
        log.debug("Copied file", src=str(source_root / sub_path), dest=str(target))
        copied.append(target)

    log.info(
        "Copied files with pattern",
        source=str(source_root),
        destination=str(destination_root),
        pattern=pattern,
        files=len(copied),
    )
    return copied
