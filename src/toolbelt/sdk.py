"""SDK root lookup."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from toolbelt.config import get_setting
from toolbelt.errors import SdkPathError
from toolbelt.logger import logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def get_sdk_path(env_name: str, *, log: FilteringBoundLogger | None = None) -> Path:
    """Return the SDK root named by the environment variable ``env_name``.

    Exits the process with status 1 when the SDK has not been unpacked
    at the configured location.
    """
    log = log or logger

    raw = get_setting(env_name)
    if not raw:
        raise SdkPathError(f"{env_name} env variable configuration error.")

    sdk_path = Path(raw)
    if not sdk_path.exists():
        log.error(f"Please download & unpack the SDK into {sdk_path}", env=env_name)
        sys.exit(1)

    return sdk_path
