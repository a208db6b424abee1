"""Shared test fixtures for rclonepy tests."""

from __future__ import annotations

import pathlib

import pytest

import rclonepy.config
import rclonepy.platforms
import rclonepy.settings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> pathlib.Path:
    """Point the global config at tmp_path and drop RCLONE_EXECUTABLE."""
    global_toml = tmp_path / "global_config" / "config.toml"
    monkeypatch.setattr(rclonepy.config, "_global_path", lambda: global_toml)
    monkeypatch.delenv("RCLONE_EXECUTABLE", raising=False)
    monkeypatch.chdir(tmp_path)
    return global_toml


@pytest.fixture
def fake_rclone(tmp_path: pathlib.Path):
    """Factory for a shell script standing in for the rclone binary."""

    def _create(body: str, name: str = "rclone") -> pathlib.Path:
        path = tmp_path / "bin" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"#!/bin/sh\n{body}\n")
        path.chmod(0o755)
        return path

    return _create


@pytest.fixture
def make_settings(tmp_path: pathlib.Path):
    """Factory for Settings rooted in tmp_path on a fixed osx/amd64 host."""

    def _create(
        executable: pathlib.Path | None = None, **overrides
    ) -> rclonepy.settings.Settings:
        install_dir = tmp_path / "bin"
        values = {
            "executable": executable or install_dir / "rclone",
            "install_dir": install_dir,
            "platform": rclonepy.platforms.PlatformDescriptor("osx", "amd64"),
        }
        values.update(overrides)
        return rclonepy.settings.Settings(**values)

    return _create
