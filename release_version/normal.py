"""The numeric core of a version: major.minor.patch[.hotfix].

A core is created with either three or four components and keeps that arity
for life. Every increment returns a new core with the bumped component and
all less significant components reset to zero.
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import UnsupportedOperationError


class Arity(Enum):
    """Number of numeric components in a version core."""

    THREE = 3
    FOUR = 4


class DigitPos(Enum):
    """Named position inside a version core."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    HOTFIX = "hotfix"


# increment_latest bumps the component one above the requested position
_LATEST_TARGET = {
    DigitPos.HOTFIX: DigitPos.PATCH,
    DigitPos.PATCH: DigitPos.MINOR,
    DigitPos.MINOR: DigitPos.MAJOR,
    DigitPos.MAJOR: DigitPos.MAJOR,
}


@total_ordering
class NormalCore(BaseModel):
    """Immutable major.minor.patch[.hotfix] tuple.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        hotfix_number: Hotfix version number, passed as ``hotfix``. Always 0
            for three component cores; read it through ``hotfix``, which
            refuses three component cores.
        arity: Whether the core has three or four components.
    """

    model_config = ConfigDict(frozen=True)

    major: int = Field(ge=0)
    minor: int = Field(default=0, ge=0)
    patch: int = Field(default=0, ge=0)
    hotfix_number: int = Field(default=0, ge=0, alias="hotfix")
    arity: Arity = Arity.THREE

    @model_validator(mode="after")
    def _hotfix_needs_four(self) -> NormalCore:
        if self.arity is Arity.THREE and self.hotfix_number != 0:
            raise ValueError("hotfix must be 0 for a three component version")
        return self

    @classmethod
    def of(cls, major: int, minor: int = 0, patch: int = 0, hotfix: int | None = None) -> NormalCore:
        """Build a core; passing ``hotfix`` makes it a four component one."""
        if hotfix is None:
            return cls(major=major, minor=minor, patch=patch)
        return cls(major=major, minor=minor, patch=patch, hotfix=hotfix, arity=Arity.FOUR)

    @property
    def hotfix(self) -> int:
        if self.arity is Arity.THREE:
            raise UnsupportedOperationError("This normal version does not support four digits")
        return self.hotfix_number

    @property
    def components(self) -> tuple[int, ...]:
        parts = (self.major, self.minor, self.patch, self.hotfix_number)
        return parts[: self.arity.value]

    @property
    def least_significant(self) -> DigitPos:
        """PATCH for three component cores, HOTFIX for four."""
        return DigitPos.PATCH if self.arity is Arity.THREE else DigitPos.HOTFIX

    def _replace(self, major: int, minor: int = 0, patch: int = 0, hotfix: int = 0) -> NormalCore:
        if self.arity is Arity.THREE:
            hotfix = 0
        return NormalCore(major=major, minor=minor, patch=patch, hotfix=hotfix, arity=self.arity)

    def increment_major(self) -> NormalCore:
        return self._replace(self.major + 1)

    def increment_minor(self) -> NormalCore:
        return self._replace(self.major, self.minor + 1)

    def increment_patch(self) -> NormalCore:
        return self._replace(self.major, self.minor, self.patch + 1)

    def increment_hotfix(self) -> NormalCore:
        """Increment the hotfix number.

        Raises:
            UnsupportedOperationError: If this is a three component core.
        """
        if self.arity is Arity.THREE:
            raise UnsupportedOperationError("This normal version does not support four digits")
        return self._replace(self.major, self.minor, self.patch, self.hotfix + 1)

    def increment_at(self, pos: DigitPos | None = None) -> NormalCore:
        """Increment the component at ``pos``.

        Without a position the least significant component is bumped.
        """
        if pos is None:
            pos = self.least_significant
        if pos is DigitPos.MAJOR:
            return self.increment_major()
        if pos is DigitPos.MINOR:
            return self.increment_minor()
        if pos is DigitPos.PATCH:
            return self.increment_patch()
        return self.increment_hotfix()

    def increment_least_significant(self) -> NormalCore:
        return self.increment_at(self.least_significant)

    def increment_latest(self, pos: DigitPos | None = None) -> NormalCore:
        """Increment the component one level above ``pos``.

        Used for "next release line" bumps: with the default position a
        three component core moves to the next minor (11.0.0 -> 11.1.0) and
        a four component core to the next patch (1.3.0.0 -> 1.3.1.0).
        """
        if pos is None:
            pos = self.least_significant
        return self.increment_at(_LATEST_TARGET[pos])

    def render(self, digits: int) -> str:
        """Render only the first ``digits`` components.

        Raises:
            UnsupportedOperationError: If ``digits`` is not between 1 and the
                core's arity.
        """
        if digits == 4 and self.arity is Arity.THREE:
            raise UnsupportedOperationError("The number of digits must be less than 4.")
        if not 1 <= digits <= self.arity.value:
            raise UnsupportedOperationError(
                f"The number of digits must be between 1 and {self.arity.value}, got {digits}."
            )
        return ".".join(str(c) for c in self.components[:digits])

    def compare_to(self, other: NormalCore) -> int:
        """Compare two cores, returning -1, 0 or 1.

        The hotfix number only takes part when both cores have four
        components.
        """
        left: tuple[int, ...] = (self.major, self.minor, self.patch)
        right: tuple[int, ...] = (other.major, other.minor, other.patch)
        if self.arity is Arity.FOUR and other.arity is Arity.FOUR:
            left += (self.hotfix_number,)
            right += (other.hotfix_number,)
        return (left > right) - (left < right)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NormalCore):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NormalCore):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        # hotfix is left out so 1.0.0 and 1.0.0.0 hash alike
        return hash((self.major, self.minor, self.patch))

    def __str__(self) -> str:
        return ".".join(str(c) for c in self.components)
