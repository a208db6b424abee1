"""Turn positional arguments and a flag mapping into an rclone argv.

Callers may end an argument list with a mapping of flags::

    ["remote:src", "remote:dst", {"dry-run": True, "transfers": 8}]

which marshals to::

    ["remote:src", "remote:dst", "--dry-run", "--transfers", "8"]

``False`` negates a flag (``{"check-first": False}`` → ``--no-check-first``).
Keys are never validated against rclone's real flag set.
"""

from __future__ import annotations

import collections.abc
import dataclasses
from typing import Any

FlagValue = str | int | float | bool


@dataclasses.dataclass(frozen=True)
class Positional:
    """A literal argument passed through as one argv token."""

    value: Any

    def token(self) -> str:
        return str(self.value)


@dataclasses.dataclass(frozen=True)
class Flags:
    """A set of long-form flags, expanded after all positionals."""

    values: collections.abc.Mapping[str, FlagValue] = dataclasses.field(
        default_factory=dict
    )

    def tokens(self) -> list[str]:
        out: list[str] = []
        for key, value in self.values.items():
            if value is False:
                out.append(f"--no-{key}")
                continue
            out.append(f"--{key}")
            if not isinstance(value, bool):
                out.append(str(value))
        return out

    def merged(self, other: collections.abc.Mapping[str, FlagValue]) -> Flags:
        return Flags({**self.values, **other})


Argument = Positional | Flags


def split_args(args: collections.abc.Sequence[Any]) -> tuple[list[Positional], Flags | None]:
    """Decide, once, whether the trailing argument is a flag set.

    Only the last element can be flags. A :class:`Flags` or any mapping
    there is taken as the flag set; everything else is positional.
    """
    items = list(args)
    flags: Flags | None = None
    if items:
        last = items[-1]
        if isinstance(last, Flags):
            flags = items.pop()
        elif isinstance(last, collections.abc.Mapping):
            flags = Flags(dict(items.pop()))
    positionals = [
        item if isinstance(item, Positional) else Positional(item) for item in items
    ]
    return positionals, flags


def kwargs_to_flags(kwargs: collections.abc.Mapping[str, FlagValue]) -> dict[str, FlagValue]:
    """Map Python keyword names to flag names (``dry_run`` → ``dry-run``)."""
    return {key.replace("_", "-"): value for key, value in kwargs.items()}


def marshal(
    positionals: collections.abc.Sequence[Positional],
    flags: Flags | None = None,
) -> list[str]:
    """Positionals first, then flag tokens in mapping order."""
    tokens = [p.token() for p in positionals]
    if flags is not None:
        tokens.extend(flags.tokens())
    return tokens


def build(*args: Any, **kwargs: FlagValue) -> list[str]:
    """``split_args`` + ``marshal`` in one call; *kwargs* extend the flags."""
    positionals, flags = split_args(args)
    if kwargs:
        flags = (flags or Flags()).merged(kwargs_to_flags(kwargs))
    return marshal(positionals, flags)
