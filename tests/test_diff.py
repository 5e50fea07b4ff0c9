"""Tests for typen.core.diff – positional input/target classification."""

from __future__ import annotations

import pytest

from typen.core.diff import CharInfo, CharState, TypingDiff


def typed(target: str, text: str) -> TypingDiff:
    diff = TypingDiff(target)
    for ch in text:
        diff.append(ch)
    return diff


# ---------------------------------------------------------------------------
# append
# ---------------------------------------------------------------------------

class TestAppend:
    def test_grows_buffer(self):
        diff = TypingDiff("abc")
        assert diff.append("a") is True
        assert diff.typed == "a"
        assert len(diff) == 1

    def test_rejects_beyond_target_length(self):
        diff = typed("ab", "ab")
        assert diff.is_complete
        assert diff.append("c") is False
        assert diff.typed == "ab"

    def test_buffer_never_exceeds_target(self):
        diff = TypingDiff("abc")
        for ch in "abcdefgh":
            diff.append(ch)
        assert len(diff) == 3

    @pytest.mark.parametrize("char", ["", "ab"])
    def test_requires_single_character(self, char: str):
        with pytest.raises(ValueError):
            TypingDiff("abc").append(char)

    def test_incorrect_characters_still_advance(self):
        diff = typed("abc", "xyz")
        assert diff.is_complete


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------

class TestClassify:
    def test_states(self):
        diff = typed("hello", "hex")
        assert diff.classify(0) is CharState.CORRECT
        assert diff.classify(1) is CharState.CORRECT
        assert diff.classify(2) is CharState.INCORRECT
        assert diff.classify(3) is CharState.CURSOR
        assert diff.classify(4) is CharState.UNTYPED

    def test_cursor_at_start(self):
        diff = TypingDiff("abc")
        assert diff.classify(0) is CharState.CURSOR
        assert diff.classify(1) is CharState.UNTYPED

    def test_positional_misalignment(self):
        # One skipped character shifts every later comparison.
        diff = typed("abcd", "acd")
        assert [diff.classify(i) for i in range(3)] == [
            CharState.CORRECT,
            CharState.INCORRECT,
            CharState.INCORRECT,
        ]

    def test_typed_at(self):
        diff = typed("abc", "ax")
        assert diff.typed_at(1) == "x"
        assert diff.typed_at(2) is None
        assert diff.typed_at(-1) is None

    def test_case_sensitive(self):
        diff = typed("A", "a")
        assert diff.classify(0) is CharState.INCORRECT


# ---------------------------------------------------------------------------
# counts and rendering info
# ---------------------------------------------------------------------------

class TestCounts:
    def test_correct_count(self):
        assert typed("hello", "helo").correct_count() == 3

    def test_correct_count_empty(self):
        assert TypingDiff("hello").correct_count() == 0

    def test_characters(self):
        diff = typed("abc", "ax")
        assert diff.characters() == [
            CharInfo(expected="a", state=CharState.CORRECT),
            CharInfo(expected="b", state=CharState.INCORRECT, typed="x"),
            CharInfo(expected="c", state=CharState.CURSOR),
        ]

    def test_characters_complete_has_no_cursor(self):
        diff = typed("ab", "ab")
        assert all(info.state is CharState.CORRECT for info in diff.characters())
