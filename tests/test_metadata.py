"""Tests for release_version.metadata."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from release_version.errors import MissingMetadataError, ParseError, UnsupportedOperationError
from release_version.metadata import ABSENT, Absent, Present, compare_metadata, parse_identifiers


def md(*tokens: str) -> Present:
    return Present(tokens=tokens)


class TestParseIdentifiers:
    def test_empty_is_absent(self) -> None:
        assert parse_identifiers("") is ABSENT
        assert parse_identifiers(None) is ABSENT

    def test_named_counter_with_dot(self) -> None:
        assert parse_identifiers("rc.1").tokens == ("rc.", "1")

    def test_named_counter_without_dot(self) -> None:
        assert parse_identifiers("dev7").tokens == ("dev", "7")

    def test_counter_leading_zeros_dropped(self) -> None:
        result = parse_identifiers("rc.007")
        assert result.tokens == ("rc.", "7")
        assert str(result) == "rc.7"

    def test_counter_too_long_fails(self) -> None:
        with pytest.raises(ParseError) as exc:
            parse_identifiers("rc." + "1" * 5000)
        assert exc.value.token == "1" * 5000

    @pytest.mark.parametrize("text", ["alpha", "feature-x", "fb-1", "rc.1.2", "IS-23188-ExcludeDomPackage"])
    def test_single_token(self, text: str) -> None:
        assert parse_identifiers(text).tokens == (text,)


class TestPresent:
    def test_requires_a_token(self) -> None:
        with pytest.raises(ValidationError):
            Present(tokens=())

    def test_renders_without_separator(self) -> None:
        assert str(md("rc.", "1")) == "rc.1"
        assert str(md("dev", "12")) == "dev12"

    def test_increment_numeric_tail(self) -> None:
        assert md("rc.", "1").increment().tokens == ("rc.", "2")
        assert md("rc.", "9").increment().tokens == ("rc.", "10")

    def test_increment_non_numeric_tail_is_noop(self) -> None:
        assert md("alpha").increment().tokens == ("alpha",)

    def test_increment_counter_too_long_fails(self) -> None:
        with pytest.raises(UnsupportedOperationError):
            md("rc.", "9" * 5000).increment()

    def test_increment_leaves_receiver(self) -> None:
        original = md("rc.", "1")
        original.increment()
        assert original.tokens == ("rc.", "1")

    def test_not_empty(self) -> None:
        assert not md("a").is_empty


class TestAbsent:
    def test_is_empty(self) -> None:
        assert ABSENT.is_empty
        assert str(ABSENT) == ""

    def test_increment_fails(self) -> None:
        with pytest.raises(MissingMetadataError):
            ABSENT.increment()

    def test_all_absents_equal(self) -> None:
        assert Absent() == ABSENT
        assert hash(Absent()) == hash(ABSENT)


class TestCompare:
    def test_absent_ranks_above_present(self) -> None:
        assert compare_metadata(ABSENT, md("anything")) == 1
        assert compare_metadata(md("anything"), ABSENT) == -1
        assert md("anything") < ABSENT

    def test_two_absents_tie(self) -> None:
        assert compare_metadata(ABSENT, Absent()) == 0

    def test_numeric_tokens_compare_numerically(self) -> None:
        assert md("rc.", "10") > md("rc.", "9")
        assert compare_metadata(md("rc.", "2"), md("rc.", "1")) == 1

    def test_text_tokens_compare_lexically(self) -> None:
        assert md("alpha") < md("beta")
        assert md("rc.", "1") > md("beta.", "1")

    def test_mixed_tokens_compare_lexically(self) -> None:
        # "10" < "9a" as strings
        assert compare_metadata(md("10"), md("9a")) == -1

    def test_long_numeric_tokens_compare_by_value(self) -> None:
        big = "9" * 5000
        assert md("rc.", big) > md("rc.", "1" + "0" * 4000)
        assert md("rc.", "0" + big) == md("rc.", big)
        assert hash(md("rc.", "0" + big)) == hash(md("rc.", big))

    def test_shorter_sequence_is_lower(self) -> None:
        assert md("rc.") < md("rc.", "1")

    def test_equal_sequences(self) -> None:
        assert md("rc.", "1") == md("rc.", "1")
        assert hash(md("rc.", "1")) == hash(md("rc.", "1"))
