"""The version value: numeric core plus branch, build and extension.

Canonical form::

    <core>[-<branch>][-<build>][-<EXTENSION>]

    1.2.3
    1.2.3.4-featurebranch-rc1
    10.10.10-branch-SNAPSHOT

Versions are immutable. All increment and set operations return a new
Version; the original input text is only kept on values built by the parser.
"""

from __future__ import annotations

from functools import total_ordering

from pydantic import BaseModel, ConfigDict

from .extension import Extension, compare_extensions
from .metadata import ABSENT, Absent, Metadata, Present, compare_metadata, parse_identifiers
from .normal import Arity, DigitPos, NormalCore

METADATA_SEPARATOR = "-"


@total_ordering
class Version(BaseModel):
    """A parsed or constructed version.

    Attributes:
        normal: The numeric core.
        branch: Branch metadata, e.g. a feature branch name.
        build: Build metadata, e.g. ``rc.1`` or ``dev7``.
        extension: SNAPSHOT, LOCAL or NONE.
        original: The text this version was parsed from, or "".
    """

    model_config = ConfigDict(frozen=True)

    normal: NormalCore
    branch: Metadata = ABSENT
    build: Metadata = ABSENT
    extension: Extension = Extension.NONE
    original: str = ""

    @classmethod
    def parse(cls, text: str, arity: Arity = Arity.THREE) -> Version:
        """Parse ``text``; see :func:`release_version.parser.parse_version`."""
        from .parser import parse_version

        return parse_version(text, arity)

    @classmethod
    def from_integers(
        cls,
        major: int,
        minor: int = 0,
        patch: int = 0,
        hotfix: int | None = None,
        arity: Arity = Arity.THREE,
    ) -> Version:
        """Build a version without metadata from plain numbers.

        Passing ``hotfix`` or ``arity=Arity.FOUR`` yields a four component
        version.
        """
        if arity is Arity.FOUR and hotfix is None:
            hotfix = 0
        return cls(normal=NormalCore.of(major, minor, patch, hotfix))

    # -- accessors ---------------------------------------------------------

    @property
    def major(self) -> int:
        return self.normal.major

    @property
    def minor(self) -> int:
        return self.normal.minor

    @property
    def patch(self) -> int:
        return self.normal.patch

    @property
    def hotfix(self) -> int:
        return self.normal.hotfix

    @property
    def arity(self) -> Arity:
        return self.normal.arity

    @property
    def suffix(self) -> str:
        """Everything after the core, including the leading separator."""
        parts = [str(p) for p in (self.branch, self.build) if not p.is_empty]
        if not self.extension.is_empty:
            parts.append(str(self.extension))
        return "".join(METADATA_SEPARATOR + p for p in parts)

    # -- rendering ---------------------------------------------------------

    def render(self, digits: int) -> str:
        """Render with a shortened core, e.g. ``render(2)`` → ``"1.2-rc.1"``."""
        return self.normal.render(digits) + self.suffix

    def to_string_from_original(self) -> str:
        """Return the parsed input if there was one, else the canonical form.

        Keeps short forms like "10.0" as the author wrote them.
        """
        return self.original or str(self)

    def __str__(self) -> str:
        return str(self.normal) + self.suffix

    def __repr__(self) -> str:
        return f"Version({str(self)!r})"

    # -- increments --------------------------------------------------------

    def increment_major(
        self, branch: str | None = None, build: str | None = None, extension: str | None = None
    ) -> Version:
        return self._increment(self.normal.increment_major(), branch, build, extension)

    def increment_minor(
        self, branch: str | None = None, build: str | None = None, extension: str | None = None
    ) -> Version:
        return self._increment(self.normal.increment_minor(), branch, build, extension)

    def increment_patch(
        self, branch: str | None = None, build: str | None = None, extension: str | None = None
    ) -> Version:
        return self._increment(self.normal.increment_patch(), branch, build, extension)

    def increment_hotfix(
        self, branch: str | None = None, build: str | None = None, extension: str | None = None
    ) -> Version:
        """Increment the hotfix number.

        Raises:
            UnsupportedOperationError: On a three component version.
        """
        return self._increment(self.normal.increment_hotfix(), branch, build, extension)

    def increment_latest(
        self,
        pos: DigitPos | None = None,
        branch: str | None = None,
        build: str | None = None,
        extension: str | None = None,
    ) -> Version:
        """Move to the next release line, or to the next build.

        If the resulting version carries build metadata, its trailing
        counter is advanced and the core stays as it is
        (1.2.3-rc.1 → 1.2.3-rc.2). Otherwise the component one level above
        ``pos`` is bumped (see :meth:`NormalCore.increment_latest`).
        """
        return self._increment(
            self.normal.increment_latest(pos), branch, build, extension, prefer_build=True
        )

    def increment_version(
        self,
        pos: DigitPos | None = None,
        branch: str | None = None,
        build: str | None = None,
        extension: str | None = None,
    ) -> Version:
        """Increment ``pos`` (default: least significant), or the next build.

        Like :meth:`increment_latest`, a version with build metadata gets its
        build counter advanced instead of a core bump.
        """
        return self._increment(
            self.normal.increment_at(pos), branch, build, extension, prefer_build=True
        )

    def increment_build_metadata(self) -> Version:
        """Advance the build counter, leaving everything else alone.

        Raises:
            MissingMetadataError: If the version has no build metadata.
        """
        return Version(
            normal=self.normal,
            branch=self.branch,
            build=self.build.increment(),
            extension=self.extension,
        )

    def _increment(
        self,
        normal: NormalCore,
        branch: str | None,
        build: str | None,
        extension: str | None,
        prefer_build: bool = False,
    ) -> Version:
        new_branch = parse_identifiers(branch) if branch else self.branch
        new_build = parse_identifiers(build) if build else self.build
        new_extension = Extension.parse(extension) if extension else self.extension

        if prefer_build and not new_build.is_empty:
            normal = self.normal
            new_build = new_build.increment()

        return Version(normal=normal, branch=new_branch, build=new_build, extension=new_extension)

    # -- setters -----------------------------------------------------------

    def set_branch_metadata(self, text: str) -> Version:
        """Replace the branch metadata; an empty string removes it."""
        return self._replace(branch=parse_identifiers(text))

    def set_build_metadata(self, text: str) -> Version:
        """Replace the build metadata; an empty string removes it."""
        return self._replace(build=parse_identifiers(text))

    def set_version_extension(self, text: str) -> Version:
        """Replace the extension ("SNAPSHOT", "LOCAL" or "" for none)."""
        return self._replace(extension=Extension.parse(text))

    def _replace(
        self,
        branch: Absent | Present | None = None,
        build: Absent | Present | None = None,
        extension: Extension | None = None,
    ) -> Version:
        return Version(
            normal=self.normal,
            branch=self.branch if branch is None else branch,
            build=self.build if build is None else build,
            extension=self.extension if extension is None else extension,
        )

    # -- ordering ----------------------------------------------------------

    def compare_to(self, other: Version) -> int:
        """Compare core, then branch, then build, then extension.

        Returns -1, 0 or 1. The original input text is ignored.
        """
        return (
            self.normal.compare_to(other.normal)
            or compare_metadata(self.branch, other.branch)
            or compare_metadata(self.build, other.build)
            or compare_extensions(self.extension, other.extension)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        return hash((self.normal, self.branch, self.build, self.extension))
