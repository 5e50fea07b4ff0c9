from __future__ import annotations

from dataclasses import dataclass

# Standard "characters per word" convention.
CHARS_PER_WORD = 5


@dataclass(frozen=True)
class LiveMetrics:
    """Snapshot of the numbers shown in the live feedback panel."""

    wpm: int
    accuracy: int
    elapsed_seconds: int
    correct: int
    mistakes: int


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; scores round .5 upwards.
    return int(value + 0.5)


def accuracy(correct: int, typed: int) -> int:
    """Percentage of typed characters that are correct; 100 before any input."""
    if typed <= 0:
        return 100
    return _round_half_up(correct / typed * 100)


def wpm(correct: int, elapsed_seconds: int) -> int:
    """Correct characters / 5, per minute of running time; 0 before the first second."""
    if elapsed_seconds <= 0:
        return 0
    return _round_half_up((correct / CHARS_PER_WORD) / (elapsed_seconds / 60))


def compute(correct: int, typed: int, elapsed_seconds: int) -> LiveMetrics:
    return LiveMetrics(
        wpm=wpm(correct, elapsed_seconds),
        accuracy=accuracy(correct, typed),
        elapsed_seconds=elapsed_seconds,
        correct=correct,
        mistakes=typed - correct,
    )


def format_duration(seconds: int) -> str:
    """Format seconds as ``m:ss``."""
    m, s = divmod(max(0, int(seconds)), 60)
    return f"{m}:{s:02d}"
