"""rclonepy: drive the rclone command-line tool from Python.

Wraps every rclone subcommand as an async method returning either the live
subprocess or its collected output, and can download a matching rclone
binary for the host platform.
"""

from __future__ import annotations

__version__ = "0.1.0"

from rclonepy.api import Output, Rclone  # noqa: E402
from rclonepy.errors import (  # noqa: E402
    ArchiveError,
    ProcessError,
    RcloneError,
    SpawnError,
    UnsupportedPlatformError,
)
from rclonepy.flags import Flags, Positional  # noqa: E402
from rclonepy.installer import UpdateOptions, UpdateResult  # noqa: E402
from rclonepy.settings import Settings  # noqa: E402

__all__ = [
    "ArchiveError",
    "Flags",
    "Output",
    "Positional",
    "ProcessError",
    "Rclone",
    "RcloneError",
    "Settings",
    "SpawnError",
    "UnsupportedPlatformError",
    "UpdateOptions",
    "UpdateResult",
]
