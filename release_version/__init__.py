"""Three and four digit release versions with branch and build metadata.

    >>> from release_version import parse
    >>> v = parse("1.2.3-rc.1")
    >>> str(v.increment_latest())
    '1.2.3-rc.2'
    >>> parse("1.0.0") > parse("1.0.0-anything")
    True
"""

from __future__ import annotations

from .errors import MissingMetadataError, ParseError, UnsupportedOperationError, VersionError
from .extension import Extension
from .metadata import ABSENT, Absent, Present
from .normal import Arity, DigitPos, NormalCore
from .parser import parse_version
from .version import Version

parse = parse_version

__all__ = [
    "ABSENT",
    "Absent",
    "Arity",
    "DigitPos",
    "Extension",
    "MissingMetadataError",
    "NormalCore",
    "ParseError",
    "Present",
    "UnsupportedOperationError",
    "Version",
    "VersionError",
    "parse",
    "parse_version",
]
