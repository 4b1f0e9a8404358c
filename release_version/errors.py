"""Exceptions raised by release_version.

Negative numeric components are rejected by the pydantic models themselves
(``pydantic.ValidationError``); everything else lands here.
"""

from __future__ import annotations


class VersionError(Exception):
    """Base class for all release_version errors."""


class ParseError(VersionError, ValueError):
    """Malformed version text.

    Attributes:
        token: The offending substring, if one can be singled out.
        text: The full input that was being parsed.
    """

    def __init__(self, message: str, *, token: str | None = None, text: str | None = None) -> None:
        self.token = token
        self.text = text
        super().__init__(message)


class UnsupportedOperationError(VersionError):
    """Operation the version cannot support, such as a hotfix on a three component core."""


class MissingMetadataError(VersionError):
    """Metadata was incremented but the version carries none."""
