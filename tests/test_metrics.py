"""Tests for typen.core.metrics – WPM and accuracy."""

from __future__ import annotations

import pytest

from typen.core import metrics
from typen.core.metrics import LiveMetrics, format_duration


class TestAccuracy:
    def test_empty_input_is_100(self):
        assert metrics.accuracy(0, 0) == 100

    def test_partial(self):
        # "helo" against "hello": positions 0-2 match
        assert metrics.accuracy(3, 4) == 75

    def test_rounds_half_up(self):
        # 1/8 = 12.5%
        assert metrics.accuracy(1, 8) == 13

    def test_all_wrong(self):
        assert metrics.accuracy(0, 7) == 0

    def test_perfect(self):
        assert metrics.accuracy(42, 42) == 100


class TestWpm:
    def test_standard_example(self):
        assert metrics.wpm(25, 60) == 5

    def test_zero_elapsed(self):
        assert metrics.wpm(25, 0) == 0

    def test_scales_per_minute(self):
        # 50 correct chars = 10 words in 30s -> 20 WPM
        assert metrics.wpm(50, 30) == 20

    def test_rounds(self):
        # (7/5) / (60/60) = 1.4
        assert metrics.wpm(7, 60) == 1
        # (8/5) / (60/60) = 1.6
        assert metrics.wpm(8, 60) == 2


class TestCompute:
    def test_snapshot(self):
        assert metrics.compute(correct=25, typed=30, elapsed_seconds=60) == LiveMetrics(
            wpm=5, accuracy=83, elapsed_seconds=60, correct=25, mistakes=5
        )

    def test_initial(self):
        live = metrics.compute(0, 0, 0)
        assert live.wpm == 0
        assert live.accuracy == 100
        assert live.mistakes == 0


class TestFormatDuration:
    @pytest.mark.parametrize(
        "seconds, expected",
        [(0, "0:00"), (5, "0:05"), (60, "1:00"), (125, "2:05"), (-3, "0:00")],
    )
    def test_format(self, seconds: int, expected: str):
        assert format_duration(seconds) == expected
