"""Exceptions raised by toolbelt."""

from __future__ import annotations

from collections.abc import Sequence


class ToolboxError(Exception):
    """Base class for toolbelt errors."""


class SdkPathError(ToolboxError):
    """The SDK environment variable is missing or empty."""


class ToolError(ToolboxError):
    """An external tool could not be started or exited with a failure status."""

    def __init__(self, args: Sequence[str], returncode: int | None, stderr: str = "") -> None:
        self.tool_args = list(args)
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            message = f"Failed to run {self.tool_args[0]}: {stderr}"
        else:
            message = f"{self.tool_args[0]} failed with exit code {returncode}: {stderr}"
        super().__init__(message)
