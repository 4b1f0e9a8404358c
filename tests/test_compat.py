"""Tests for release_version.compat."""

from __future__ import annotations

import pytest
import semver

from release_version import parse
from release_version.compat import from_semver, to_semver
from release_version.errors import UnsupportedOperationError
from release_version.extension import Extension


class TestToSemver:
    def test_plain(self) -> None:
        result = to_semver(parse("1.2.3"))
        assert result == semver.Version(1, 2, 3)
        assert result.prerelease is None

    def test_metadata_becomes_prerelease(self) -> None:
        result = to_semver(parse("1.2.3-fb-rc.1-SNAPSHOT"))
        assert result.prerelease == "fb-rc.1"
        assert result.build == "SNAPSHOT"
        assert str(result) == "1.2.3-fb-rc.1+SNAPSHOT"

    def test_four_digits_unsupported(self) -> None:
        with pytest.raises(UnsupportedOperationError):
            to_semver(parse("1.2.3.4"))

    def test_invalid_prerelease(self) -> None:
        with pytest.raises(ValueError):
            to_semver(parse("1.2.3-fb_x"))


class TestFromSemver:
    def test_round_trip(self) -> None:
        v = parse("1.2.3-fb-rc.1-SNAPSHOT")
        back = from_semver(to_semver(v))
        assert back == v
        assert str(back.branch) == "fb"
        assert str(back.build) == "rc.1"
        assert back.extension is Extension.SNAPSHOT

    def test_unknown_build_dropped(self) -> None:
        v = from_semver(semver.Version.parse("2.0.0-rc.4+build.5"))
        assert str(v) == "2.0.0-rc.4"
