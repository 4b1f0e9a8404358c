"""Version string parser.

Grammar::

    <version>  ::= <core>
                 | <core> "-" <metadata>
    <core>     ::= <number> ("." <number>){0,3}
    <metadata> ::= [<branch> "-"] [<build>] ["-" ("SNAPSHOT" | "LOCAL")]

The metadata is classified from the right: a trailing snapshot/local marker
becomes the extension, a trailing ``letters[.]digits`` group becomes the
build metadata and whatever is left is the branch metadata.

Examples:
    "10"                        → 10.0.0
    "1.2.3.4-featurebranch-rc1" → branch "featurebranch", build "rc1"
    "1.0.0-fb-1-SNAPSHOT"       → branch "fb-1", extension SNAPSHOT
"""

from __future__ import annotations

import re

from .errors import ParseError
from .extension import Extension
from .metadata import Absent, Present, parse_identifiers
from .normal import Arity, NormalCore
from .version import METADATA_SEPARATOR, Version

_FOUR_GROUPS = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+")
_CORE_PATTERNS = {
    Arity.THREE: re.compile(r"[0-9]+(?:\.[0-9]+){0,2}"),
    Arity.FOUR: re.compile(r"[0-9]+(?:\.[0-9]+){0,3}"),
}
_BUILD_TAIL = re.compile(r"[A-Za-z]+\.?[0-9]+$")

_SNAPSHOT = "snapshot"
_LOCAL = "local"


def parse_version(text: str, arity: Arity = Arity.THREE) -> Version:
    """Parse a version string.

    Args:
        text: The version text, e.g. "1.2.3-rc.1".
        arity: Arity for cores with fewer than four components. A core with
            four components is always parsed as four.

    Raises:
        ParseError: If the text does not follow the grammar.
    """
    if not text:
        raise ParseError("Input string is empty", text=text)

    idx = text.find(METADATA_SEPARATOR)
    if idx > 0:
        core, metadata = text[:idx], text[idx + 1 :]
    else:
        core, metadata = text, ""

    if _FOUR_GROUPS.fullmatch(core):
        arity = Arity.FOUR
    if not _CORE_PATTERNS[arity].fullmatch(core):
        raise ParseError(f"No valid version found in {text}!", token=core, text=text)

    branch_text, build_text, extension = _split_metadata(metadata)

    return Version(
        normal=parse_normal_core(core, arity, text),
        branch=parse_branch_metadata(branch_text),
        build=parse_build_metadata(build_text),
        extension=extension,
        original=text,
    )


def parse_normal_core(core: str, arity: Arity = Arity.THREE, text: str | None = None) -> NormalCore:
    """Parse the numeric core, padding missing trailing components with 0.

    Args:
        core: Dot-separated numbers, e.g. "1.2".
        arity: Number of components of the result.
        text: Full input, used in error messages. Defaults to ``core``.
    """
    text = core if text is None else text
    parts = core.split(".")
    if len(parts) > arity.value:
        raise ParseError(f"No valid version found in {text}!", token=core, text=text)
    parts += ["0"] * (arity.value - len(parts))
    numbers = [_parse_number(p, text) for p in parts]
    return NormalCore.of(*numbers)


def parse_branch_metadata(text: str | None) -> Absent | Present:
    return parse_identifiers(text)


def parse_build_metadata(text: str | None) -> Absent | Present:
    return parse_identifiers(text)


def parse_extension(text: str | None) -> Extension:
    return Extension.parse(text)


def _split_metadata(metadata: str) -> tuple[str, str, Extension]:
    """Split metadata into (branch, build, extension)."""
    if not metadata:
        return "", "", Extension.NONE

    extension = Extension.NONE
    lowered = metadata.lower()
    # only one marker is stripped; "x-local-snapshot" keeps "x-local" as metadata
    for marker, candidate in ((_SNAPSHOT, Extension.SNAPSHOT), (_LOCAL, Extension.LOCAL)):
        if not lowered.endswith(marker):
            continue
        if lowered == marker:
            extension, metadata = candidate, ""
        elif lowered.endswith(METADATA_SEPARATOR + marker):
            extension = candidate
            metadata = metadata[: -len(METADATA_SEPARATOR + marker)]
        break

    if not metadata:
        return "", "", extension

    match = _BUILD_TAIL.search(metadata)
    if match is None:
        return metadata, "", extension

    branch = metadata[: match.start()]
    if branch.endswith(METADATA_SEPARATOR):
        branch = branch[: -len(METADATA_SEPARATOR)]
    return branch, match.group(), extension


def _parse_number(digit: str, text: str) -> int:
    if not digit:
        raise ParseError(f"One part of the version is empty ({text})", token=digit, text=text)
    if len(digit) > 1 and digit.startswith("0"):
        raise ParseError(
            f"Numeric identifier MUST NOT contain leading zeroes ({digit} in {text})",
            token=digit,
            text=text,
        )
    if not digit.isdigit() or not digit.isascii():
        raise ParseError(f"It was not possible to parse {digit} of {text}", token=digit, text=text)
    try:
        return int(digit)
    except ValueError as exc:
        raise ParseError(f"It was not possible to parse {digit} of {text}", token=digit, text=text) from exc

