"""Branch and build metadata as identifier sequences.

Metadata is either ``Absent`` (the canonical ``ABSENT`` singleton) or
``Present`` with at least one token. A version that carries metadata ranks
below the same version without it, the same way a SemVer pre-release ranks
below its release:

    1.0.0-rc.1 < 1.0.0-rc.2 < 1.0.0
"""

from __future__ import annotations

import re
from functools import total_ordering
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import MissingMetadataError, ParseError, UnsupportedOperationError

_NUMERIC = re.compile(r"[0-9]+")
# "rc.1", "dev7", "fb.01" - name (with optional dot) followed by a counter
_NAMED_COUNTER = re.compile(r"(?P<name>[A-Za-z]+\.?)(?P<number>[0-9]+)")


def _is_numeric(token: str) -> bool:
    return _NUMERIC.fullmatch(token) is not None


def _numeric_key(token: str) -> tuple[int, str]:
    # orders digit strings by value without int(), which caps string length
    digits = token.lstrip("0") or "0"
    return len(digits), digits


def _compare_tokens(left: str, right: str) -> int:
    if _is_numeric(left) and _is_numeric(right):
        a, b = _numeric_key(left), _numeric_key(right)
        return (a > b) - (a < b)
    return (left > right) - (left < right)


def compare_metadata(left: Metadata, right: Metadata) -> int:
    """Compare two identifier sequences, returning -1, 0 or 1.

    Absent metadata is greater than any present metadata. Present sequences
    are compared token by token (numerically when both tokens are digits,
    lexically otherwise); if all shared tokens tie, the shorter one is lower.
    """
    if isinstance(left, Absent):
        return 0 if isinstance(right, Absent) else 1
    if isinstance(right, Absent):
        return -1

    for a, b in zip(left.tokens, right.tokens):
        result = _compare_tokens(a, b)
        if result:
            return result
    return (len(left.tokens) > len(right.tokens)) - (len(left.tokens) < len(right.tokens))


@total_ordering
class _MetadataBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Absent, Present)):
            return NotImplemented
        return compare_metadata(self, other) == 0  # type: ignore[arg-type]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (Absent, Present)):
            return NotImplemented
        return compare_metadata(self, other) < 0  # type: ignore[arg-type]

    def __hash__(self) -> int:
        tokens = getattr(self, "tokens", ())
        return hash(tuple(_numeric_key(t) if _is_numeric(t) else t for t in tokens))


class Absent(_MetadataBase):
    """No metadata. Use the ``ABSENT`` singleton."""

    kind: Literal["absent"] = "absent"

    @property
    def is_empty(self) -> bool:
        return True

    def increment(self) -> Present:
        raise MissingMetadataError("Metadata version is empty")

    def __str__(self) -> str:
        return ""


class Present(_MetadataBase):
    """A non-empty sequence of metadata tokens.

    Tokens render back to back without a separator, so ``("rc.", "1")``
    renders as ``rc.1``.
    """

    kind: Literal["present"] = "present"
    tokens: tuple[str, ...] = Field(min_length=1)

    @property
    def is_empty(self) -> bool:
        return False

    def increment(self) -> Present:
        """Advance a trailing numeric counter.

        A sequence whose last token is not numeric comes back unchanged.
        """
        *head, last = self.tokens
        if _is_numeric(last):
            try:
                last = str(int(last) + 1)
            except ValueError as exc:
                raise UnsupportedOperationError("Metadata counter is too large to increment") from exc
        return Present(tokens=(*head, last))

    def __str__(self) -> str:
        return "".join(self.tokens)


ABSENT = Absent()

Metadata = Annotated[Union[Absent, Present], Field(discriminator="kind")]


def parse_identifiers(text: str | None) -> Absent | Present:
    """Split metadata text into an identifier sequence.

    Examples:
        "" → ABSENT
        "rc.01" → ("rc.", "1")
        "dev7" → ("dev", "7")
        "feature-x" → ("feature-x",)
    """
    if not text:
        return ABSENT
    match = _NAMED_COUNTER.fullmatch(text)
    if match:
        try:
            number = str(int(match["number"]))
        except ValueError as exc:
            raise ParseError(
                f"It was not possible to parse {match['number']} of {text}",
                token=match["number"],
                text=text,
            ) from exc
        return Present(tokens=(match["name"], number))
    return Present(tokens=(text,))
