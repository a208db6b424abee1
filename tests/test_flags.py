"""Tests for rclonepy.flags — argument marshalling."""

from __future__ import annotations

import typing

import rclonepy.flags


def _marshal(*args, **kwargs) -> list[str]:
    return rclonepy.flags.build(*args, **kwargs)


class TestFlagTokens:
    def test_false_negates(self) -> None:
        assert _marshal({"check-first": False}) == ["--no-check-first"]

    def test_true_is_bare_flag(self) -> None:
        assert _marshal({"dry-run": True}) == ["--dry-run"]

    def test_number_value(self) -> None:
        assert _marshal({"transfers": 8}) == ["--transfers", "8"]

    def test_string_value(self) -> None:
        assert _marshal({"include": "*.jpg"}) == ["--include", "*.jpg"]

    def test_zero_is_a_value_not_false(self) -> None:
        assert _marshal({"retries": 0}) == ["--retries", "0"]

    def test_empty_string_is_a_value(self) -> None:
        assert _marshal({"password": ""}) == ["--password", ""]

    def test_keys_passed_verbatim(self) -> None:
        assert _marshal({"not_a_real_flag": 1}) == ["--not_a_real_flag", "1"]

    def test_iteration_order_kept(self) -> None:
        flags = {"b": True, "a": 1, "c": False}
        assert _marshal(flags) == ["--b", "--a", "1", "--no-c"]


class TestSplitArgs:
    def test_positionals_precede_flags(self) -> None:
        assert _marshal("src:", "dst:", {"dry-run": True, "transfers": 4}) == [
            "src:",
            "dst:",
            "--dry-run",
            "--transfers",
            "4",
        ]

    def test_trailing_non_mapping_is_positional(self) -> None:
        assert _marshal("src:", "dst:") == ["src:", "dst:"]

    def test_trailing_list_is_positional(self) -> None:
        positionals, flags = rclonepy.flags.split_args(["a", ["x"]])
        assert flags is None
        assert [p.value for p in positionals] == ["a", ["x"]]

    def test_trailing_none_is_positional(self) -> None:
        positionals, flags = rclonepy.flags.split_args(["a", None])
        assert flags is None
        assert len(positionals) == 2

    def test_only_last_mapping_is_flags(self) -> None:
        positionals, flags = rclonepy.flags.split_args([{"x": 1}, "a"])
        assert flags is None
        assert positionals[0].value == {"x": 1}

    def test_empty_flag_set_emits_positionals_only(self) -> None:
        assert _marshal("remote:", {}) == ["remote:"]

    def test_explicit_flags_variant(self) -> None:
        flags = rclonepy.flags.Flags({"fast-list": True})
        assert _marshal("remote:", flags) == ["remote:", "--fast-list"]

    def test_explicit_positional_variant(self) -> None:
        arg = rclonepy.flags.Positional(42)
        assert _marshal(arg) == ["42"]

    def test_no_arguments(self) -> None:
        assert _marshal() == []

    def test_numeric_positionals_stringified(self) -> None:
        assert _marshal("remote:", 3) == ["remote:", "3"]


class TestKeywordFlags:
    def test_underscores_become_dashes(self) -> None:
        assert _marshal("remote:", dry_run=True) == ["remote:", "--dry-run"]

    def test_keywords_follow_mapping(self) -> None:
        assert _marshal("a", {"transfers": 2}, no_traverse=True) == [
            "a",
            "--transfers",
            "2",
            "--no-traverse",
        ]

    def test_keyword_false_negates(self) -> None:
        assert _marshal(update=False) == ["--no-update"]


class TestAliases:
    def test_flag_value_members(self) -> None:
        assert typing.get_args(rclonepy.flags.FlagValue) == (str, int, float, bool)

    def test_argument_members(self) -> None:
        assert typing.get_args(rclonepy.flags.Argument) == (
            rclonepy.flags.Positional,
            rclonepy.flags.Flags,
        )
