"""Positional comparison of the typed buffer against the target text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class CharState(Enum):
    UNTYPED = "untyped"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    CURSOR = "cursor"


@dataclass(frozen=True)
class CharInfo:
    """Render information for one target position."""

    expected: str
    state: CharState
    typed: Optional[str] = None


class TypingDiff:
    """Immutable target plus a buffer that only ever grows.

    Matching is strictly positional: position ``i`` of the buffer is compared
    with position ``i`` of the target and nothing else, so a skipped or extra
    keystroke shifts every later comparison.
    """

    def __init__(self, target: str) -> None:
        self._target = target
        self._typed: List[str] = []

    @property
    def target(self) -> str:
        return self._target

    @property
    def typed(self) -> str:
        return "".join(self._typed)

    def __len__(self) -> int:
        return len(self._typed)

    @property
    def is_complete(self) -> bool:
        return len(self._typed) == len(self._target)

    def append(self, char: str) -> bool:
        """Append one character; returns False once the target length is reached."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        if self.is_complete:
            return False
        self._typed.append(char)
        return True

    def classify(self, index: int) -> CharState:
        typed_len = len(self._typed)
        if index < typed_len:
            if self._typed[index] == self._target[index]:
                return CharState.CORRECT
            return CharState.INCORRECT
        if index == typed_len:
            return CharState.CURSOR
        return CharState.UNTYPED

    def typed_at(self, index: int) -> Optional[str]:
        """The character actually typed at *index*, or None if not typed yet."""
        if 0 <= index < len(self._typed):
            return self._typed[index]
        return None

    def correct_count(self) -> int:
        return sum(1 for typed, expected in zip(self._typed, self._target) if typed == expected)

    def characters(self) -> List[CharInfo]:
        """Classification of every target position, for rendering."""
        infos: List[CharInfo] = []
        for i, expected in enumerate(self._target):
            state = self.classify(i)
            typed = self.typed_at(i) if state is CharState.INCORRECT else None
            infos.append(CharInfo(expected=expected, state=state, typed=typed))
        return infos
