"""Resolved, immutable runtime settings.

Config sections ``rclone`` and ``selfupdate`` live in TOML; the
``RCLONE_EXECUTABLE`` environment variable overrides the executable path.
:meth:`Settings.resolve` folds all of that into one frozen object that the
invoker and installer take in their constructors.
"""

from __future__ import annotations

import dataclasses
import os
import pathlib

import rclonepy.config
import rclonepy.platforms

ENV_EXECUTABLE = "RCLONE_EXECUTABLE"

DEFAULT_INSTALL_DIR = pathlib.Path(__file__).resolve().parent / "bin"


@rclonepy.config.configurable("rclone")
@dataclasses.dataclass
class RcloneConfig:
    # Empty means <install_dir>/rclone[.exe]
    executable: str = ""
    # Empty means the "bin" directory inside the installed package
    install_dir: str = ""


@rclonepy.config.configurable("selfupdate")
@dataclasses.dataclass
class SelfUpdateConfig:
    stable_url: str = "https://downloads.rclone.org"
    beta_url: str = "https://beta.rclone.org"
    timeout: float = 60.0


@dataclasses.dataclass(frozen=True)
class Settings:
    executable: pathlib.Path
    install_dir: pathlib.Path
    platform: rclonepy.platforms.PlatformDescriptor
    stable_url: str = "https://downloads.rclone.org"
    beta_url: str = "https://beta.rclone.org"
    timeout: float = 60.0

    @property
    def default_executable(self) -> pathlib.Path:
        """Where the installer puts the binary for this platform."""
        return self.install_dir / self.platform.executable_name

    @classmethod
    def resolve(
        cls,
        root: pathlib.Path | None = None,
        *,
        environ: dict[str, str] | None = None,
        platform: rclonepy.platforms.PlatformDescriptor | None = None,
    ) -> Settings:
        """Build settings from config files, environment and host platform."""
        env = os.environ if environ is None else environ
        plat = platform or rclonepy.platforms.current()
        rclone_cfg = rclonepy.config.load("rclone", root)
        update_cfg = rclonepy.config.load("selfupdate", root)

        install_dir = (
            pathlib.Path(rclone_cfg.install_dir).expanduser()
            if rclone_cfg.install_dir
            else DEFAULT_INSTALL_DIR
        )
        if env.get(ENV_EXECUTABLE):
            executable = pathlib.Path(env[ENV_EXECUTABLE])
        elif rclone_cfg.executable:
            executable = pathlib.Path(rclone_cfg.executable).expanduser()
        else:
            executable = install_dir / plat.executable_name

        return cls(
            executable=executable,
            install_dir=install_dir,
            platform=plat,
            stable_url=update_cfg.stable_url.rstrip("/"),
            beta_url=update_cfg.beta_url.rstrip("/"),
            timeout=float(update_cfg.timeout),
        )
