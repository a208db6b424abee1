"""Map the host OS and CPU to rclone's release naming.

rclone publishes archives named ``rclone-<release>-<os>-<arch>.zip`` where
``<os>`` and ``<arch>`` use Go's vocabulary (``osx``, ``windows``,
``amd64``...). The tables below translate from the conventional
``darwin``/``win32``/``x64`` names. Unknown names pass through unchanged.
"""

from __future__ import annotations

import dataclasses
import functools
import platform
import sys

import rclonepy.errors

OS_NAMES: dict[str, str] = {
    "darwin": "osx",
    "freebsd": "freebsd",
    "linux": "linux",
    "openbsd": "openbsd",
    "sunos": "solaris",
    "win32": "windows",
}

ARCH_NAMES: dict[str, str] = {
    "arm": "arm",
    "arm64": "arm64",
    "mips": "mips",
    "mipsel": "mipsel",
    "x32": "386",
    "x64": "amd64",
}

# platform.machine() spellings → the names ARCH_NAMES is keyed on
_MACHINE_ALIASES: dict[str, str] = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "i386": "x32",
    "i486": "x32",
    "i586": "x32",
    "i686": "x32",
    "x86": "x32",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv6l": "arm",
    "armv7l": "arm",
    "armv8l": "arm",
    "arm": "arm",
    "mips": "mips",
    "mipsel": "mipsel",
}


@dataclasses.dataclass(frozen=True)
class PlatformDescriptor:
    os_name: str
    arch_name: str

    @property
    def executable_name(self) -> str:
        return "rclone.exe" if self.os_name == "windows" else "rclone"

    @property
    def archive_suffix(self) -> str:
        return f"{self.os_name}-{self.arch_name}.zip"


def resolve(
    os_name: str, arch_name: str, *, strict: bool = False
) -> PlatformDescriptor:
    """Translate ``(os, arch)`` into rclone's release names.

    With *strict*, names missing from the tables raise
    :class:`~rclonepy.errors.UnsupportedPlatformError` instead of passing
    through.
    """
    if strict:
        if os_name not in OS_NAMES:
            raise rclonepy.errors.UnsupportedPlatformError(
                f"Unsupported operating system: {os_name}"
            )
        if arch_name not in ARCH_NAMES:
            raise rclonepy.errors.UnsupportedPlatformError(
                f"Unsupported architecture: {arch_name}"
            )
    return PlatformDescriptor(
        os_name=OS_NAMES.get(os_name, os_name),
        arch_name=ARCH_NAMES.get(arch_name, arch_name),
    )


def host_os() -> str:
    """Return the running OS as ``darwin``, ``linux``, ``win32``, ..."""
    name = sys.platform
    # sys.platform carries a version suffix on the BSDs and Solaris
    for prefix in ("freebsd", "openbsd", "sunos"):
        if name.startswith(prefix):
            return prefix
    if name.startswith("linux"):
        return "linux"
    if name == "cygwin":
        return "win32"
    return name


def host_arch() -> str:
    """Return the running CPU as ``x64``, ``arm64``, ``x32``, ..."""
    machine = platform.machine().lower()
    return _MACHINE_ALIASES.get(machine, machine)


@functools.cache
def current() -> PlatformDescriptor:
    """Descriptor for this process, computed once."""
    return resolve(host_os(), host_arch())
