"""rclonepy CLI.

Usage:
    rclonepy <subcommand> [args...]   Run rclone, passing everything through
    rclonepy selfupdate [opts]        Install or update the rclone binary
        --beta                        Use the beta channel
        --stable / --no-stable        Force or refuse the stable channel
        --version V                   Install a specific release (e.g. v1.66.0)
        --check                       Only print the latest available version
    rclonepy install [opts]           Download rclone even if one is present
    rclonepy settings <cmd>           Show or change rclonepy's own settings

Environment:
    RCLONE_EXECUTABLE                 Path to the rclone binary to run
    RCLONEPY_DEBUG=1                  Verbose logging
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

import httpx

import rclonepy.errors
import rclonepy.installer
import rclonepy.process
import rclonepy.settings

logger = logging.getLogger("rclonepy")


def _setup_logging() -> None:
    debug = os.environ.get("RCLONEPY_DEBUG", "") not in ("", "0")
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
    )


def _parse_update_args(args: list[str], prog: str) -> rclonepy.installer.UpdateOptions:
    parser = argparse.ArgumentParser(prog=prog)
    parser.add_argument("--beta", action="store_true", help="Use the beta channel")
    parser.add_argument(
        "--stable",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Use the stable channel (default: unless --beta)",
    )
    parser.add_argument("--version", default=None, help="Release to install")
    parser.add_argument(
        "--check", action="store_true", help="Print the latest version and exit"
    )
    ns = parser.parse_args(args)
    return rclonepy.installer.UpdateOptions(
        beta=ns.beta, stable=ns.stable, version=ns.version, check=ns.check
    )


async def _selfupdate(options: rclonepy.installer.UpdateOptions) -> int:
    installer = rclonepy.installer.Installer(rclonepy.settings.Settings.resolve())
    result = await installer.update(options)
    if result.delegated_output:
        sys.stdout.buffer.write(result.delegated_output)
        sys.stdout.buffer.flush()
    if result.latest_version is not None:
        print(result.latest_version.strip())
    return 0


async def _install(options: rclonepy.installer.UpdateOptions) -> int:
    installer = rclonepy.installer.Installer(rclonepy.settings.Settings.resolve())
    await installer.install(options)
    return 0


async def _passthrough(command: str, args: list[str]) -> int:
    """Run rclone on the caller's terminal and return its exit code."""
    invoker = rclonepy.process.Invoker(rclonepy.settings.Settings.resolve())
    process = await invoker.spawn(
        command, *args, stdin=None, stdout=None, stderr=None
    )
    return await process.wait()


def _cmd_update(args: list[str], *, force: bool) -> int:
    prog = "rclonepy install" if force else "rclonepy selfupdate"
    options = _parse_update_args(args, prog)
    coro = _install(options) if force else _selfupdate(options)
    try:
        return asyncio.run(coro)
    except httpx.HTTPError as exc:
        print(f"Download failed: {exc}", file=sys.stderr)
        return 1
    except rclonepy.errors.ProcessError as exc:
        sys.stderr.buffer.write(exc.stderr or f"{exc}\n".encode())
        sys.stderr.buffer.flush()
        return exc.returncode or 1
    except rclonepy.errors.RcloneError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Install failed: {exc}", file=sys.stderr)
        return 1


def _cmd_passthrough(command: str, args: list[str]) -> int:
    try:
        return asyncio.run(_passthrough(command, args))
    except rclonepy.errors.SpawnError as exc:
        print(str(exc), file=sys.stderr)
        print("Run 'rclonepy install' to download rclone.", file=sys.stderr)
        return 127
    except KeyboardInterrupt:
        return 130


def main() -> None:
    args = sys.argv[1:]
    if not args:
        print(__doc__)
        sys.exit(1)

    _setup_logging()
    cmd = args[0]
    rest = args[1:]

    if cmd == "settings":
        import rclonepy.settings_cli

        sys.exit(rclonepy.settings_cli.main(rest))
    elif cmd == "selfupdate":
        sys.exit(_cmd_update(rest, force=False))
    elif cmd == "install":
        sys.exit(_cmd_update(rest, force=True))
    else:
        sys.exit(_cmd_passthrough(cmd, rest))


if __name__ == "__main__":
    main()
