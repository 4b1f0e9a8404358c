"""Data models for release tooling built on top of Version."""

from __future__ import annotations

from pydantic import BaseModel


class ProjectVersion(BaseModel):
    """The version declared by a project's pyproject.toml.

    Attributes:
        name: Canonical project name.
        path: Path to the pyproject.toml it was read from.
        version: The [project].version string as written.
    """

    name: str
    path: str
    version: str


class VersionBump(BaseModel):
    """Records a version change.

    Attributes:
        old: The version before bumping.
        new: The version after bumping.
    """

    old: str
    new: str

    def __str__(self) -> str:
        return f"{self.old} → {self.new}"
