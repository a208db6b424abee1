"""Scriptable rclone API.

Usage::

    rc = rclonepy.Rclone()

    # live process, read its streams yourself
    proc = await rc.lsjson("remote:bucket", {"recursive": True})

    # collected stdout bytes; raises ProcessError on failure
    listing = await rc.output.lsjson("remote:bucket", recursive=True)

    await rc.output.config_create("myremote", "s3", {"provider": "AWS"})

Every name in :data:`rclonepy.commands.COMMANDS` is available both ways,
with spaces replaced by underscores.
"""

from __future__ import annotations

import asyncio
import functools
from typing import Any

import httpx

import rclonepy.commands
import rclonepy.installer
import rclonepy.process
import rclonepy.results
import rclonepy.settings


class Output:
    """Commands that resolve to rclone's collected standard output."""

    def __init__(self, invoker: rclonepy.process.Invoker) -> None:
        self._invoker = invoker

    async def __call__(
        self, command: str, *args: Any, input: bytes | None = None, **flags: Any
    ) -> bytes:
        return await rclonepy.results.run(
            self._invoker, command, *args, input=input, **flags
        )

    def command(self, name: str):
        """Bound entry point for any subcommand, listed or not."""
        return functools.partial(self, name)


class Rclone:
    def __init__(
        self,
        settings: rclonepy.settings.Settings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or rclonepy.settings.Settings.resolve()
        self.invoker = rclonepy.process.Invoker(self.settings)
        self.output = Output(self.invoker)
        self._http_client = http_client

    async def spawn(
        self, command: str, *args: Any, **kwargs: Any
    ) -> asyncio.subprocess.Process:
        return await self.invoker.spawn(command, *args, **kwargs)

    def command(self, name: str):
        """Bound entry point for any subcommand, listed or not."""
        return functools.partial(self.spawn, name)

    async def selfupdate(
        self,
        options: rclonepy.installer.UpdateOptions | None = None,
        **kwargs: Any,
    ) -> rclonepy.installer.UpdateResult:
        """Install or update rclone. Keyword arguments build ``UpdateOptions``."""
        if options is None:
            options = rclonepy.installer.UpdateOptions(**kwargs)
        installer = rclonepy.installer.Installer(
            self.settings, http_client=self._http_client
        )
        return await installer.update(options)


def _spawner(command: str):
    async def method(self: Rclone, *args: Any, **kwargs: Any) -> asyncio.subprocess.Process:
        return await self.spawn(command, *args, **kwargs)

    method.__name__ = rclonepy.commands.attribute_name(command)
    method.__doc__ = f"Start ``rclone {command}`` and return the running process."
    return method


def _collector(command: str):
    async def method(self: Output, *args: Any, **kwargs: Any) -> bytes:
        return await self(command, *args, **kwargs)

    method.__name__ = rclonepy.commands.attribute_name(command)
    method.__doc__ = f"Run ``rclone {command}`` and return its standard output."
    return method


for _command in rclonepy.commands.COMMANDS:
    setattr(Rclone, rclonepy.commands.attribute_name(_command), _spawner(_command))
    setattr(Output, rclonepy.commands.attribute_name(_command), _collector(_command))
del _command
