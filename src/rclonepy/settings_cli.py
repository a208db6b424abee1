"""``rclonepy settings``: inspect and change rclonepy's own settings.

Usage:
    rclonepy settings show                            Effective values and resolved paths
    rclonepy settings get <section.key>               Print one effective value
    rclonepy settings set [--user] <section.key> <v>  Store a value (project file by default)

These live under ``settings`` so that ``rclonepy config ...`` always reaches
rclone's own ``config`` subcommands.
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path

import rclonepy.config
import rclonepy.settings


def _parse_key(key: str) -> tuple[str, str]:
    section, sep, field = key.partition(".")
    if not sep or not field:
        raise ValueError(f"Expected section.key, got {key!r}")
    return section, field


def cmd_show(root: Path) -> int:
    for section in rclonepy.config.sections():
        print(f"[{section}]")
        values = dataclasses.asdict(rclonepy.config.load(section, root))
        for name, value in values.items():
            print(f"{name} = {value!r}")
        print()
    resolved = rclonepy.settings.Settings.resolve(root)
    print("# resolved")
    print(f"executable = {str(resolved.executable)!r}")
    print(f"install_dir = {str(resolved.install_dir)!r}")
    print(f"platform = {resolved.platform.os_name}-{resolved.platform.arch_name}")
    return 0


def cmd_get(key: str, root: Path) -> int:
    try:
        section, field = _parse_key(key)
        print(getattr(rclonepy.config.load(section, root), field))
    except (KeyError, AttributeError, ValueError) as exc:
        print(f"Unknown setting {key!r}: {exc}", file=sys.stderr)
        return 1
    return 0


def cmd_set(key: str, value: str, *, scope: str, root: Path) -> int:
    try:
        section, field = _parse_key(key)
        path = rclonepy.config.store(section, field, value, scope=scope, root=root)
    except (KeyError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print(f"{key} = {value} written to {path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for ``rclonepy settings``."""
    parser = argparse.ArgumentParser(
        prog="rclonepy settings", description="rclonepy's own settings."
    )
    parser.add_argument(
        "--path", type=Path, default=None, help="Project directory (default: auto)"
    )
    sub = parser.add_subparsers(dest="subcmd")
    sub.add_parser("show", help="Effective values and resolved paths")
    p_get = sub.add_parser("get", help="Print one effective value")
    p_get.add_argument("key", help="section.key")
    p_set = sub.add_parser("set", help="Store a value")
    p_set.add_argument("key", help="section.key")
    p_set.add_argument("value")
    p_set.add_argument(
        "--user", action="store_true", help="Write the user file instead of the project's"
    )

    args = parser.parse_args(argv)
    root = rclonepy.config.project_root(args.path)

    if args.subcmd == "show":
        return cmd_show(root)
    if args.subcmd == "get":
        return cmd_get(args.key, root)
    if args.subcmd == "set":
        scope = "user" if args.user else "project"
        return cmd_set(args.key, args.value, scope=scope, root=root)
    parser.print_help()
    return 1
