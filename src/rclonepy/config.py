"""Layered TOML settings for rclonepy.

Each section is a dataclass registered with ``@configurable``. Its values
come from the field defaults, then the user file, then the project file
found nearest to the working directory:

    ~/.config/rclonepy/config.toml     user
    <project>/.rclonepy/config.toml    project
"""

from __future__ import annotations

import dataclasses
import logging
import pathlib
import tomllib
from typing import Any, TypeVar

import tomli_w

logger = logging.getLogger("rclonepy.config")

T = TypeVar("T")

PROJECT_DIR = ".rclonepy"
SCOPES = ("project", "user")

_SECTIONS: dict[str, type] = {}


def configurable(section: str):
    """Bind a dataclass to the ``[section]`` table."""

    def decorator(cls: type[T]) -> type[T]:
        _SECTIONS[section] = cls
        return cls

    return decorator


def _global_path() -> pathlib.Path:
    return pathlib.Path.home() / ".config" / "rclonepy" / "config.toml"


def project_root(start: pathlib.Path | None = None) -> pathlib.Path:
    """Nearest ancestor of the cwd holding ``.rclonepy/``, else the cwd.

    An explicit *start* is used as is.
    """
    if start is not None:
        return start
    cwd = pathlib.Path.cwd()
    for candidate in (cwd, *cwd.parents):
        if (candidate / PROJECT_DIR).is_dir():
            return candidate
    return cwd


def path_for(scope: str, root: pathlib.Path | None = None) -> pathlib.Path:
    if scope == "user":
        return _global_path()
    if scope == "project":
        return project_root(root) / PROJECT_DIR / "config.toml"
    raise ValueError(f"Unknown scope {scope!r}, expected one of {SCOPES}")


def _read(path: pathlib.Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text())
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return {}


def _section_fields(section: str) -> tuple[type, dict[str, dataclasses.Field]]:
    try:
        cls = _SECTIONS[section]
    except KeyError:
        raise KeyError(f"Unknown config section: {section}") from None
    return cls, {f.name: f for f in dataclasses.fields(cls)}


def sections() -> list[str]:
    return sorted(_SECTIONS)


def load(section: str, root: pathlib.Path | None = None) -> Any:
    """Instantiate *section* with user and project overrides applied."""
    cls, fields = _section_fields(section)
    values: dict[str, Any] = {}
    for scope in ("user", "project"):
        table = _read(path_for(scope, root)).get(section, {})
        values.update((k, v) for k, v in table.items() if k in fields)
    return cls(**values)


def parse_value(section: str, key: str, raw: str) -> Any:
    """Convert command-line text to the type of the field's default."""
    _, fields = _section_fields(section)
    if key not in fields:
        raise KeyError(f"Unknown key: {section}.{key}")
    kind = type(fields[key].default)
    if kind is bool:
        if raw.lower() in ("true", "1", "yes", "on"):
            return True
        if raw.lower() in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"Expected a boolean for {section}.{key}, got {raw!r}")
    if kind in (int, float):
        return kind(raw)
    return raw


def store(
    section: str,
    key: str,
    raw: str,
    *,
    scope: str = "project",
    root: pathlib.Path | None = None,
) -> pathlib.Path:
    """Persist one value into the *scope* file and return that file's path."""
    value = parse_value(section, key, raw)
    path = path_for(scope, root)
    data = _read(path)
    data.setdefault(section, {})[key] = value
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tomli_w.dumps(data))
    return path
