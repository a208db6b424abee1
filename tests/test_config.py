"""Tests for rclonepy.config: layered TOML loading and stored values."""

from __future__ import annotations

import dataclasses
import pathlib

import pytest

import rclonepy.config


@rclonepy.config.configurable("test_section")
@dataclasses.dataclass
class _TestConfig:
    timeout: float = 30.0
    url: str = "https://downloads.rclone.org"
    retries: int = 3
    beta: bool = False


def _write_project(root: pathlib.Path, text: str) -> None:
    path = root / ".rclonepy" / "config.toml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)


class TestLoad:
    def test_defaults(self, tmp_path: pathlib.Path) -> None:
        cfg = rclonepy.config.load("test_section", root=tmp_path)
        assert cfg == _TestConfig()

    def test_unknown_section(self, tmp_path: pathlib.Path) -> None:
        with pytest.raises(KeyError, match="Unknown config section"):
            rclonepy.config.load("nonexistent_section_xyz", root=tmp_path)

    def test_sections_listed(self) -> None:
        assert {"rclone", "selfupdate", "test_section"} <= set(
            rclonepy.config.sections()
        )

    def test_project_beats_user(
        self, tmp_path: pathlib.Path, isolated_config: pathlib.Path
    ) -> None:
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text("[test_section]\nretries = 1\nbeta = true\n")
        _write_project(tmp_path, "[test_section]\nretries = 2\n")
        cfg = rclonepy.config.load("test_section", root=tmp_path)
        assert cfg.retries == 2
        assert cfg.beta is True

    def test_unknown_keys_ignored(self, tmp_path: pathlib.Path) -> None:
        _write_project(tmp_path, "[test_section]\nbogus = 1\n")
        assert rclonepy.config.load("test_section", root=tmp_path) == _TestConfig()

    def test_malformed_toml_falls_back(self, tmp_path: pathlib.Path) -> None:
        _write_project(tmp_path, "[test_section\nretries = ")
        assert rclonepy.config.load("test_section", root=tmp_path).retries == 3


class TestProjectRoot:
    def test_walks_up_to_marker(
        self, tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / ".rclonepy").mkdir()
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert rclonepy.config.project_root() == tmp_path

    def test_explicit_root(self, tmp_path: pathlib.Path) -> None:
        assert rclonepy.config.project_root(tmp_path / "x") == tmp_path / "x"

    def test_unknown_scope(self, tmp_path: pathlib.Path) -> None:
        with pytest.raises(ValueError, match="Unknown scope"):
            rclonepy.config.path_for("system", tmp_path)


class TestStore:
    def test_project_value_coerced(self, tmp_path: pathlib.Path) -> None:
        path = rclonepy.config.store("test_section", "retries", "5", root=tmp_path)
        assert path == tmp_path / ".rclonepy" / "config.toml"
        assert rclonepy.config.load("test_section", root=tmp_path).retries == 5

    def test_float_and_bool(self, tmp_path: pathlib.Path) -> None:
        rclonepy.config.store("test_section", "timeout", "1.5", root=tmp_path)
        rclonepy.config.store("test_section", "beta", "yes", root=tmp_path)
        cfg = rclonepy.config.load("test_section", root=tmp_path)
        assert cfg.timeout == 1.5
        assert cfg.beta is True

    def test_bad_bool_rejected(self, tmp_path: pathlib.Path) -> None:
        with pytest.raises(ValueError, match="boolean"):
            rclonepy.config.store("test_section", "beta", "maybe", root=tmp_path)

    def test_user_scope(
        self, tmp_path: pathlib.Path, isolated_config: pathlib.Path
    ) -> None:
        rclonepy.config.store(
            "test_section", "url", "https://mirror", scope="user", root=tmp_path
        )
        assert isolated_config.exists()
        assert not (tmp_path / ".rclonepy").exists()
        assert rclonepy.config.load("test_section", root=tmp_path).url == "https://mirror"

    def test_keeps_other_values(self, tmp_path: pathlib.Path) -> None:
        _write_project(tmp_path, "[other]\nkeep = 1\n")
        rclonepy.config.store("test_section", "retries", "7", root=tmp_path)
        text = (tmp_path / ".rclonepy" / "config.toml").read_text()
        assert "keep = 1" in text
        assert "retries = 7" in text

    def test_unknown_key(self, tmp_path: pathlib.Path) -> None:
        with pytest.raises(KeyError, match="Unknown key"):
            rclonepy.config.store("test_section", "bogus", "x", root=tmp_path)

    def test_unknown_section(self, tmp_path: pathlib.Path) -> None:
        with pytest.raises(KeyError, match="Unknown config section"):
            rclonepy.config.store("nope", "x", "1", root=tmp_path)
