"""Build-support helpers for packaging native apps."""

from __future__ import annotations

from .config import get_setting, read_env_file
from .errors import SdkPathError, ToolboxError, ToolError
from .fs_utils import copy_dir_with_pattern
from .includes import format_include_dir, get_sdk_include_dirs
from .metadata import get_package_name, packed_version
from .sdk import get_sdk_path
from .tools import codesign, compile_xib_to_nib, run_external_tool
from .types import IncludeDirFormat, ToolResult

__all__ = [
    # config
    "get_setting",
    "read_env_file",
    # errors
    "SdkPathError",
    "ToolboxError",
    "ToolError",
    # fs_utils
    "copy_dir_with_pattern",
    # includes
    "format_include_dir",
    "get_sdk_include_dirs",
    # metadata
    "get_package_name",
    "packed_version",
    # sdk
    "get_sdk_path",
    # tools
    "codesign",
    "compile_xib_to_nib",
    "run_external_tool",
    # types
    "IncludeDirFormat",
    "ToolResult",
]
