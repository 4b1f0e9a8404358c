"""Reserved trailing version markers: SNAPSHOT and LOCAL."""

from __future__ import annotations

from enum import Enum

from .errors import ParseError


class Extension(Enum):
    LOCAL = "LOCAL"
    SNAPSHOT = "SNAPSHOT"
    NONE = "NONE"

    @classmethod
    def parse(cls, text: str | None) -> Extension:
        """Look up an extension by its exact (case-sensitive) name.

        An empty string means no extension.

        Raises:
            ParseError: If ``text`` is not a known extension name.
        """
        if not text:
            return cls.NONE
        try:
            return cls[text]
        except KeyError:
            raise ParseError(f"Unsupported version extension {text!r}", token=text, text=text) from None

    @property
    def is_empty(self) -> bool:
        return self is Extension.NONE

    def compare_to(self, other: Extension) -> int:
        return compare_extensions(self, other)

    def __str__(self) -> str:
        return _DISPLAY[self]


_DISPLAY = {
    Extension.LOCAL: "LOCAL",
    Extension.SNAPSHOT: "SNAPSHOT",
    Extension.NONE: "",
}

# LOCAL < SNAPSHOT < NONE
_PRECEDENCE = {
    Extension.LOCAL: 0,
    Extension.SNAPSHOT: 1,
    Extension.NONE: 2,
}


def compare_extensions(left: Extension, right: Extension) -> int:
    a, b = _PRECEDENCE[left], _PRECEDENCE[right]
    return (a > b) - (a < b)
