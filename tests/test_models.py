"""Tests for release_version.models."""

from __future__ import annotations

from release_version.models import ProjectVersion, VersionBump


class TestProjectVersion:
    def test_create(self) -> None:
        project = ProjectVersion(name="pkg", path="pyproject.toml", version="1.0")
        assert project.version == "1.0"


class TestVersionBump:
    def test_create(self) -> None:
        bump = VersionBump(old="1.0.0", new="1.0.1")
        assert bump.old == "1.0.0"
        assert bump.new == "1.0.1"
        assert str(bump) == "1.0.0 → 1.0.1"
