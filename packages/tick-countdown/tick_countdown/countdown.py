"""Countdown state machines: single, multi, repeating and the inert placeholder.

All variants share one operation set. A host advances a countdown with
``advance(dt)`` and then re-derives its status with ``refresh_status()``;
``is_one_interval_complete()`` is the per-repetition signal and
``is_fully_complete()`` the terminal one.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from tick_countdown.types import Callback, TimerMode, TimerStatus

logger = logging.getLogger(__name__)

_INVALID_MESSAGE = (
    "Countdown %r is empty: mode and repetition count do not match, "
    "register it again with matching arguments"
)


class Countdown(ABC):
    """Common state of every countdown variant."""

    mode: TimerMode | None = None
    valid: bool = True

    def __init__(self, countdown_id: str) -> None:
        self._countdown_id = countdown_id
        self.status: TimerStatus = TimerStatus.BEGINNING
        self.on_complete: Callback | None = None

    @property
    def countdown_id(self) -> str:
        return self._countdown_id

    @abstractmethod
    def advance(self, dt: float) -> None: ...

    @abstractmethod
    def refresh_status(self) -> None: ...

    @abstractmethod
    def is_one_interval_complete(self) -> bool: ...

    def is_fully_complete(self) -> bool:
        return self.status is TimerStatus.FULLY_COMPLETE

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._countdown_id!r}, status={self.status.name})"


class SingleCountdown(Countdown):
    """Fires once when the remaining time reaches zero."""

    mode = TimerMode.ONE_TIME

    def __init__(self, countdown_id: str, duration: float) -> None:
        super().__init__(countdown_id)
        self._remaining = duration

    @property
    def remaining(self) -> float:
        return self._remaining

    def advance(self, dt: float) -> None:
        self._remaining -= dt

    def refresh_status(self) -> None:
        if self._remaining > 0:
            self.status = TimerStatus.IN_PROCESS
        else:
            self.status = TimerStatus.FULLY_COMPLETE

    def is_one_interval_complete(self) -> bool:
        # Level-triggered: stays True once expired.
        return self._remaining <= 0


class _IntervalCountdown(Countdown):
    """Shared rollover bookkeeping for multi and repeating countdowns."""

    def __init__(self, countdown_id: str, interval: float) -> None:
        super().__init__(countdown_id)
        self._interval = interval
        self._remaining = interval
        self._completed = 0
        self._last_observed = 0

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def remaining(self) -> float:
        return self._remaining

    @property
    def completed_repetitions(self) -> int:
        return self._completed

    def advance(self, dt: float) -> None:
        self._remaining -= dt

    def _roll_over(self) -> None:
        self._completed += 1
        self._remaining = self._interval

    def is_one_interval_complete(self) -> bool:
        """Edge-triggered: True once per rollover since the previous call."""
        if self._completed - self._last_observed >= 1:
            self._last_observed = self._completed
            return True
        return False


class MultiCountdown(_IntervalCountdown):
    """Runs the first interval plus ``repetitions`` more, then completes."""

    mode = TimerMode.MULTI_TIME

    def __init__(self, countdown_id: str, duration: float, repetitions: int) -> None:
        super().__init__(countdown_id, duration)
        self._remaining_repetitions = repetitions

    @property
    def remaining_repetitions(self) -> int:
        return self._remaining_repetitions

    def refresh_status(self) -> None:
        if self._remaining > 0:
            self.status = TimerStatus.IN_PROCESS
        elif self._remaining_repetitions > 0:
            self._remaining_repetitions -= 1
            self._roll_over()
            self.status = TimerStatus.IN_PROCESS
        else:
            self.status = TimerStatus.FULLY_COMPLETE


class RepeatingCountdown(_IntervalCountdown):
    """Rolls over forever. Only cancellation stops it."""

    mode = TimerMode.REPEAT

    def refresh_status(self) -> None:
        # Strict comparison: landing exactly on zero does not roll over yet.
        if self._remaining < 0:
            self._roll_over()
        self.status = TimerStatus.IN_PROCESS


class EmptyCountdown(Countdown):
    """Inert placeholder for a mode/argument mismatch.

    Every operation logs a warning and returns a safe default, so the
    owning registry can hold and tick it without special cases.
    """

    valid = False

    def __init__(
        self, countdown_id: str, duration: float, repetitions: int | None = None
    ) -> None:
        super().__init__(countdown_id)
        self.requested_duration = duration
        self.requested_repetitions = repetitions
        self._warn()

    def _warn(self) -> None:
        logger.warning(_INVALID_MESSAGE, self._countdown_id)

    def advance(self, dt: float) -> None:
        self._warn()

    def refresh_status(self) -> None:
        self._warn()

    def is_one_interval_complete(self) -> bool:
        self._warn()
        return False

    def is_fully_complete(self) -> bool:
        self._warn()
        return False
