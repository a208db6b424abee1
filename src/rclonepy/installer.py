"""Download and install the rclone binary for this host.

Once an rclone executable exists, updates are delegated to
``rclone selfupdate``. Otherwise the release archive for the host platform
is fetched from the download site and the single ``rclone``/``rclone.exe``
member is unpacked into the install directory.

The install directory is not locked; callers must not run two installs
against the same directory at once.
"""

from __future__ import annotations

import dataclasses
import io
import logging
import os
import pathlib
import posixpath
import re
import zipfile

import httpx

import rclonepy.errors
import rclonepy.flags
import rclonepy.process
import rclonepy.results
import rclonepy.settings

logger = logging.getLogger("rclonepy.installer")

_EXECUTABLE_NAME = re.compile(r"rclone(\.exe)?")

EXECUTABLE_MODE = 0o755


@dataclasses.dataclass
class UpdateOptions:
    beta: bool = False
    # None means "not given": the channel then follows ``not beta``
    stable: bool | None = None
    version: str | None = None
    check: bool = False

    @property
    def effective_stable(self) -> bool:
        return (not self.beta) if self.stable is None else self.stable

    @property
    def channel(self) -> str:
        return "current" if self.effective_stable else "beta-latest"

    def archive_name(self) -> str:
        if self.version:
            return f"{self.version}/rclone-{self.version}"
        return f"rclone-{self.channel}"

    def to_flags(self) -> rclonepy.flags.Flags:
        """Only the options the caller actually set, for ``rclone selfupdate``."""
        values: dict[str, rclonepy.flags.FlagValue] = {}
        if self.beta:
            values["beta"] = True
        if self.stable is not None:
            values["stable"] = self.stable
        if self.version:
            values["version"] = self.version
        if self.check:
            values["check"] = True
        return rclonepy.flags.Flags(values)


@dataclasses.dataclass
class UpdateResult:
    latest_version: str | None = None
    installed: list[str] = dataclasses.field(default_factory=list)
    delegated_output: bytes | None = None


def release_name(entry_name: str) -> str:
    """``rclone-v1.2.3-osx-amd64/rclone`` → ``rclone-v1.2.3-osx-amd64``."""
    parent = posixpath.dirname(entry_name.rstrip("/"))
    return parent or posixpath.basename(entry_name)


def extract_executables(archive: bytes, install_dir: pathlib.Path) -> list[str]:
    """Unpack every rclone executable member of *archive*, flattened.

    Returns the release names of the installed members. Raises
    :class:`~rclonepy.errors.ArchiveError` if the archive cannot be read or
    holds no executable.
    """
    try:
        zf = zipfile.ZipFile(io.BytesIO(archive))
    except zipfile.BadZipFile as exc:
        raise rclonepy.errors.ArchiveError(f"Invalid rclone archive: {exc}") from exc

    installed: list[str] = []
    with zf:
        for info in zf.infolist():
            if info.is_dir():
                continue
            name = posixpath.basename(info.filename)
            if not _EXECUTABLE_NAME.fullmatch(name):
                continue
            install_dir.mkdir(parents=True, exist_ok=True)
            target = install_dir / name
            target.write_bytes(zf.read(info))
            os.chmod(target, EXECUTABLE_MODE)
            release = release_name(info.filename)
            logger.info("%s is installed.", release)
            installed.append(release)

    if not installed:
        raise rclonepy.errors.ArchiveError(
            "No rclone executable found in archive"
        )
    return installed


class Installer:
    def __init__(
        self,
        settings: rclonepy.settings.Settings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings
        self._client = http_client

    def base_url(self, options: UpdateOptions) -> str:
        if options.effective_stable:
            return self.settings.stable_url
        return self.settings.beta_url

    def archive_url(self, options: UpdateOptions) -> str:
        return (
            f"{self.base_url(options)}/{options.archive_name()}"
            f"-{self.settings.platform.archive_suffix}"
        )

    async def _get(self, url: str) -> bytes:
        logger.debug("GET %s", url)
        if self._client is not None:
            resp = await self._client.get(url)
            resp.raise_for_status()
            return resp.content
        async with httpx.AsyncClient(
            timeout=self.settings.timeout, follow_redirects=True
        ) as client:
            resp = await client.get(url)
            resp.raise_for_status()
            return resp.content

    async def latest_version(self, options: UpdateOptions | None = None) -> str:
        """Fetch ``version.txt`` for the selected channel."""
        options = options or UpdateOptions()
        body = await self._get(f"{self.base_url(options)}/version.txt")
        return body.decode()

    async def install(self, options: UpdateOptions | None = None) -> list[str]:
        """Download and unpack the archive, ignoring any existing binary."""
        options = options or UpdateOptions()
        logger.info("Downloading rclone...")
        archive = await self._get(self.archive_url(options))
        logger.info("Extracting rclone...")
        return extract_executables(archive, self.settings.install_dir)

    async def update(self, options: UpdateOptions | None = None) -> UpdateResult:
        """Update rclone, delegating to ``rclone selfupdate`` when present."""
        options = options or UpdateOptions()

        if self.settings.executable.exists():
            invoker = rclonepy.process.Invoker(self.settings)
            output = await rclonepy.results.run(
                invoker, "selfupdate", options.to_flags()
            )
            return UpdateResult(delegated_output=output)

        if options.check:
            version = await self.latest_version(options)
            logger.info("The latest version is %s", version.strip())
            return UpdateResult(latest_version=version)

        return UpdateResult(installed=await self.install(options))
