"""Exception types raised by rclonepy."""

from __future__ import annotations


class RcloneError(Exception):
    """Base class for every error raised by this package."""


class SpawnError(RcloneError):
    """The rclone executable could not be started."""

    def __init__(self, executable: str, cause: OSError) -> None:
        super().__init__(f"Failed to spawn {executable}: {cause}")
        self.executable = executable
        self.cause = cause


class ProcessError(RcloneError):
    """rclone exited nonzero or wrote to standard error.

    ``stderr`` holds the raw captured bytes.
    """

    def __init__(self, stderr: bytes, returncode: int | None) -> None:
        message = stderr.decode(errors="replace").strip()
        if not message:
            message = f"rclone exited with code {returncode}"
        super().__init__(message)
        self.stderr = stderr
        self.returncode = returncode


class ArchiveError(RcloneError):
    """The downloaded archive is unreadable or has no rclone executable."""


class UnsupportedPlatformError(RcloneError):
    """Raised in strict mode for an OS or architecture outside the tables."""
