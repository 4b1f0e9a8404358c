"""Tests for release_version.extension."""

from __future__ import annotations

import pytest

from release_version.errors import ParseError
from release_version.extension import Extension, compare_extensions


class TestParse:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("SNAPSHOT", Extension.SNAPSHOT),
            ("LOCAL", Extension.LOCAL),
            ("NONE", Extension.NONE),
            ("", Extension.NONE),
            (None, Extension.NONE),
        ],
    )
    def test_known(self, text: str | None, expected: Extension) -> None:
        assert Extension.parse(text) is expected

    @pytest.mark.parametrize("text", ["snapshot", "Local", "RELEASE"])
    def test_case_sensitive_and_closed(self, text: str) -> None:
        with pytest.raises(ParseError) as exc:
            Extension.parse(text)
        assert exc.value.token == text


class TestDisplay:
    def test_str(self) -> None:
        assert str(Extension.SNAPSHOT) == "SNAPSHOT"
        assert str(Extension.LOCAL) == "LOCAL"
        assert str(Extension.NONE) == ""

    def test_is_empty(self) -> None:
        assert Extension.NONE.is_empty
        assert not Extension.SNAPSHOT.is_empty


class TestOrdering:
    def test_local_snapshot_none(self) -> None:
        assert compare_extensions(Extension.LOCAL, Extension.SNAPSHOT) == -1
        assert compare_extensions(Extension.SNAPSHOT, Extension.NONE) == -1
        assert compare_extensions(Extension.NONE, Extension.LOCAL) == 1
        assert Extension.SNAPSHOT.compare_to(Extension.SNAPSHOT) == 0
