"""Conversion between Version and semver.Version.

Only three component versions have a SemVer counterpart. Branch and build
metadata become the SemVer pre-release (joined with "-", so the text parses
back the same way), and the extension becomes SemVer build metadata:

    1.2.3-fb-rc.1-SNAPSHOT  ↔  semver 1.2.3-fb-rc.1+SNAPSHOT

Precedence is not preserved: SemVer orders pre-releases by its own rules
and ignores build metadata.
"""

from __future__ import annotations

import semver

from .errors import UnsupportedOperationError
from .extension import Extension
from .normal import Arity
from .parser import parse_version
from .version import METADATA_SEPARATOR, Version


def to_semver(version: Version) -> semver.Version:
    """Convert a three component Version to semver.Version.

    Raises:
        UnsupportedOperationError: For four component versions.
        ValueError: If the metadata is not a valid SemVer pre-release.
    """
    if version.arity is Arity.FOUR:
        raise UnsupportedOperationError(f"{version} has four digits and no SemVer equivalent")

    text = str(version.normal)
    prerelease = METADATA_SEPARATOR.join(
        str(part) for part in (version.branch, version.build) if not part.is_empty
    )
    if prerelease:
        text += f"-{prerelease}"
    if not version.extension.is_empty:
        text += f"+{version.extension}"
    return semver.Version.parse(text)


def from_semver(value: semver.Version) -> Version:
    """Convert a semver.Version by re-parsing it through the version grammar.

    SemVer build metadata is kept only if it names an extension
    (SNAPSHOT or LOCAL); anything else has no place in a Version.
    """
    text = f"{value.major}.{value.minor}.{value.patch}"
    if value.prerelease:
        text += f"-{value.prerelease}"
    if value.build in (Extension.SNAPSHOT.value, Extension.LOCAL.value):
        text += f"-{value.build}"
    return parse_version(text)
