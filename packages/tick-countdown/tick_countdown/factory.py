"""CountdownFactory: pick the countdown variant for a mode."""
from __future__ import annotations

from tick_countdown.countdown import (
    Countdown,
    EmptyCountdown,
    MultiCountdown,
    RepeatingCountdown,
    SingleCountdown,
)
from tick_countdown.types import TimerMode


class CountdownFactory:
    """Builds countdowns. Mismatched arguments yield an EmptyCountdown."""

    def produce(
        self,
        mode: TimerMode,
        countdown_id: str,
        duration: float,
        repetitions: int | None = None,
    ) -> Countdown:
        """Return the variant for ``mode``.

        ``repetitions`` is only meaningful for MULTI_TIME and is required
        there. Passing it with ONE_TIME or REPEAT, omitting it for
        MULTI_TIME, or passing a negative count produces an inert
        EmptyCountdown instead of raising.
        """
        if repetitions is None:
            if mode is TimerMode.ONE_TIME:
                return SingleCountdown(countdown_id, duration)
            if mode is TimerMode.REPEAT:
                return RepeatingCountdown(countdown_id, duration)
        elif mode is TimerMode.MULTI_TIME and repetitions >= 0:
            return MultiCountdown(countdown_id, duration, repetitions)
        return EmptyCountdown(countdown_id, duration, repetitions)
