"""Collect a finished rclone process into a single result.

Both streams are drained to the end and the process is reaped before a
verdict is reached, so stdout and stderr cannot race each other: stderr
content or a nonzero exit raises :class:`~rclonepy.errors.ProcessError`,
otherwise the stdout bytes are returned.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import rclonepy.errors
import rclonepy.process

logger = logging.getLogger("rclonepy.results")


async def _drain(stream: asyncio.StreamReader | None) -> bytes:
    if stream is None:
        return b""
    chunks: list[bytes] = []
    while True:
        chunk = await stream.read(65536)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


async def collect(
    process: asyncio.subprocess.Process,
    input: bytes | None = None,
) -> bytes:
    """Wait for *process* and return its stdout.

    *input*, when given, is written to stdin which is then closed.
    """

    async def _feed() -> None:
        if process.stdin is None:
            return
        try:
            if input:
                process.stdin.write(input)
                await process.stdin.drain()
        except (BrokenPipeError, ConnectionResetError):
            logger.debug("rclone closed stdin early")
        finally:
            process.stdin.close()

    try:
        _, stdout, stderr = await asyncio.gather(
            _feed(), _drain(process.stdout), _drain(process.stderr)
        )
        returncode = await process.wait()
    except BaseException:
        # Nobody else holds the handle, so a cancelled caller must not leak the child.
        if process.returncode is None:
            logger.debug("Killing rclone (pid %s)", process.pid)
            try:
                process.kill()
            except ProcessLookupError:
                pass
            await process.wait()
        raise

    if stderr or returncode != 0:
        logger.debug("rclone failed (exit %s): %r", returncode, stderr[:200])
        raise rclonepy.errors.ProcessError(stderr, returncode)
    return stdout


async def run(
    invoker: rclonepy.process.Invoker,
    command: str,
    *args: Any,
    input: bytes | None = None,
    **flags: Any,
) -> bytes:
    """Spawn *command* and collect it. Spawn failures propagate unchanged."""
    process = await invoker.spawn(command, *args, **flags)
    return await collect(process, input=input)
