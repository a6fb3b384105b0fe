"""Glob expansion shared by the copier and the include expander."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from wcmatch import glob

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

# A pattern without a slash matches base names at any depth, like a .gitignore entry.
COPY_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.IGNORECASE | glob.DOTGLOB | glob.MATCHBASE | glob.NODIR

INCLUDE_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.IGNORECASE | glob.DOTGLOB


def iter_matches(expression: str, flags: int, root_dir: Path | None = None) -> Iterator[str]:
    """Expand a glob expression and yield the matched paths in sorted order.

    Sorting collects every match before the first one is yielded.

    With ``root_dir`` the expression and the results are relative to it.
    Directories that cannot be read are skipped.
    """
    root = os.fspath(root_dir) if root_dir is not None else None
    yield from sorted(glob.iglob(expression, flags=flags, root_dir=root))
