"""toolbelt domain types."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class IncludeDirFormat(str, Enum):
    """Rendering of the entries returned by get_sdk_include_dirs."""

    PLAIN = "plain"
    CLANG = "clang"


class ToolResult(BaseModel):
    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""
