"""Spawn rclone subprocesses.

The invoker does no buffering: it hands back the live
``asyncio.subprocess.Process`` and the caller reads its streams.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import rclonepy.errors
import rclonepy.flags
import rclonepy.settings

logger = logging.getLogger("rclonepy.process")

PIPE = asyncio.subprocess.PIPE


class Invoker:
    """Runs ``<executable> <command...> <args...> <flags...>``."""

    def __init__(self, settings: rclonepy.settings.Settings) -> None:
        self.settings = settings

    @property
    def executable(self) -> str:
        return str(self.settings.executable)

    def argv(self, command: str, *args: Any, **flags: Any) -> list[str]:
        """Full argument vector, executable first.

        *command* may hold several words (``"config create"``); each becomes
        its own token.
        """
        return [self.executable, *command.split(), *rclonepy.flags.build(*args, **flags)]

    async def spawn(
        self,
        command: str,
        *args: Any,
        stdin: Any = PIPE,
        stdout: Any = PIPE,
        stderr: Any = PIPE,
        **flags: Any,
    ) -> asyncio.subprocess.Process:
        """Start rclone and return the running process.

        Raises :class:`~rclonepy.errors.SpawnError` when the executable is
        missing or cannot be run.
        """
        argv = self.argv(command, *args, **flags)
        logger.debug("Spawning: %s", argv)
        try:
            return await asyncio.create_subprocess_exec(
                *argv,
                stdin=stdin,
                stdout=stdout,
                stderr=stderr,
            )
        except OSError as exc:
            raise rclonepy.errors.SpawnError(self.executable, exc) from exc
