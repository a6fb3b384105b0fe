"""Wrappers around the Xcode command line tools used when packaging apps."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

from toolbelt import config
from toolbelt.errors import ToolError
from toolbelt.globbing import COPY_FLAGS, iter_matches
from toolbelt.logger import logger
from toolbelt.types import ToolResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from structlog.typing import FilteringBoundLogger


def run_external_tool(args: Sequence[str], *, log: FilteringBoundLogger | None = None) -> ToolResult:
    """Run an external tool to completion and capture its output.

    Raises ToolError when the tool cannot be started or exits non-zero.
    """
    log = log or logger
    argv = [str(a) for a in args]
    log.debug("Running external tool", args=argv)

    try:
        result = subprocess.run(argv, capture_output=True, text=True)
    except OSError as e:
        raise ToolError(argv, None, str(e)) from e

    if result.returncode != 0:
        raise ToolError(argv, result.returncode, result.stderr.strip())

    return ToolResult(args=argv, returncode=result.returncode, stdout=result.stdout, stderr=result.stderr)


def compile_xib_to_nib(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
    *,
    log: FilteringBoundLogger | None = None,
) -> list[Path]:
    """Compile the *.xib files found below source into *.nib files using ibtool.

    All nib files are written directly into destination; the source
    directory structure is not preserved.
    """
    log = log or logger
    source_dir = Path(source)
    destination_dir = Path(destination)
    destination_dir.mkdir(parents=True, exist_ok=True)

    nibs: list[Path] = []
    for match in iter_matches("*.xib", COPY_FLAGS, root_dir=source_dir):
        xib_path = source_dir / match
        nib_path = (destination_dir / xib_path.name).with_suffix(".nib")
        log.debug("Compile xib", src=str(xib_path), dest=str(nib_path))
        run_external_tool([config.IBTOOL_BIN, "--compile", str(nib_path), str(xib_path)], log=log)
        nibs.append(nib_path)

    return nibs


def codesign(package: str | os.PathLike[str], *, log: FilteringBoundLogger | None = None) -> ToolResult:
    """Ad-hoc sign a package bundle with codesign."""
    log = log or logger
    result = run_external_tool([config.CODESIGN_BIN, "--force", "--sign", "-", os.fspath(package)], log=log)
    log.info("Signed package", package=os.fspath(package))
    return result
