"""Tests for tick_countdown.factory - CountdownFactory."""
from __future__ import annotations

import pytest

from tick_countdown.countdown import (
    EmptyCountdown,
    MultiCountdown,
    RepeatingCountdown,
    SingleCountdown,
)
from tick_countdown.factory import CountdownFactory
from tick_countdown.types import TimerMode


class TestProduceValid:
    def test_one_time(self) -> None:
        c = CountdownFactory().produce(TimerMode.ONE_TIME, "a", 1.0)
        assert isinstance(c, SingleCountdown)
        assert c.countdown_id == "a"
        assert c.remaining == 1.0

    def test_repeat(self) -> None:
        c = CountdownFactory().produce(TimerMode.REPEAT, "r", 2.0)
        assert isinstance(c, RepeatingCountdown)
        assert c.interval == 2.0

    def test_multi_time(self) -> None:
        c = CountdownFactory().produce(TimerMode.MULTI_TIME, "m", 1.5, 4)
        assert isinstance(c, MultiCountdown)
        assert c.interval == 1.5
        assert c.remaining_repetitions == 4

    def test_multi_time_zero_repetitions(self) -> None:
        c = CountdownFactory().produce(TimerMode.MULTI_TIME, "m", 1.0, 0)
        assert isinstance(c, MultiCountdown)


class TestProduceMismatch:
    @pytest.mark.parametrize(
        "mode, repetitions",
        [
            (TimerMode.MULTI_TIME, None),
            (TimerMode.ONE_TIME, 2),
            (TimerMode.REPEAT, 2),
            (TimerMode.MULTI_TIME, -1),
        ],
    )
    def test_mismatch_yields_empty(self, mode, repetitions) -> None:
        """Mismatched arguments never raise, they produce a placeholder."""
        c = CountdownFactory().produce(mode, "x", 1.0, repetitions)
        assert isinstance(c, EmptyCountdown)
        assert c.countdown_id == "x"
        assert c.valid is False
