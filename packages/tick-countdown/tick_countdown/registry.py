"""TimerRegistry - named countdowns driven by a fixed tick."""
from __future__ import annotations

import logging
import os
import random as _random_mod

from tick_countdown.config import RegistryConfig
from tick_countdown.countdown import Countdown
from tick_countdown.factory import CountdownFactory
from tick_countdown.ids import IdGenerator
from tick_countdown.types import (
    Callback,
    IssueHandler,
    TimerIssue,
    TimerMode,
    TimerStatus,
)

logger = logging.getLogger(__name__)


class TimerRegistry:
    """Owns countdowns by id and advances all of them on each tick.

    Constructed once by the host and passed to whoever needs timers. Unknown
    ids and invalid countdowns are reported through logging and
    ``on_issue`` handlers; nothing here raises for them.
    """

    def __init__(
        self, config: RegistryConfig | None = None, seed: int | None = None
    ) -> None:
        self.config: RegistryConfig = config if config is not None else RegistryConfig()
        self._countdowns: dict[str, Countdown] = {}
        self._factory = CountdownFactory()
        self._issue_handlers: list[IssueHandler] = []

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._ids = IdGenerator(
            _random_mod.Random(seed),
            self.config.id_alphabet,
            self.config.id_min_length,
            self.config.id_max_length,
        )

    @property
    def seed(self) -> int:
        return self._seed

    # --- Registration ---

    def start_counting(
        self,
        mode: TimerMode,
        countdown_id: str,
        duration: float,
        repetitions: int | None = None,
        on_complete: Callback | None = None,
    ) -> Countdown:
        """Register a countdown at ``countdown_id``. Last writer wins.

        A countdown already registered under the same id is dropped without
        firing its callback.
        """
        countdown = self._factory.produce(mode, countdown_id, duration, repetitions)
        countdown.on_complete = on_complete
        if countdown_id in self._countdowns:
            logger.debug("Replacing countdown %r", countdown_id)
        self._countdowns[countdown_id] = countdown

        if countdown.valid:
            logger.debug(
                "Started %r countdown %r (duration=%s, repetitions=%s)",
                mode, countdown_id, duration, repetitions,
            )
        else:
            logger.warning(
                "Registered invalid countdown %r: mode %r with repetitions=%r",
                countdown_id, mode, repetitions,
            )
            self._report(TimerIssue.INVALID_CONFIGURATION, countdown_id)
        return countdown

    def insert_timer(self, duration: float, action: Callback) -> str:
        """Register a one-shot under a fresh random id.

        When it completes, ``action`` runs and the timer removes itself, even
        if ``action`` raises. Returns the generated id.

        Raises IdGenerationError only when ``RegistryConfig`` leaves fewer
        free ids than ``id_max_attempts`` can find (a tiny alphabet or
        length range); with the defaults this cannot happen in practice.
        """
        countdown_id = self._ids.unique(self._countdowns, self.config.id_max_attempts)

        def fire_and_remove() -> None:
            try:
                action()
            finally:
                if self._countdowns.get(countdown_id) is countdown:
                    del self._countdowns[countdown_id]
                    logger.debug("Anonymous timer %r removed itself", countdown_id)

        countdown = self.start_counting(
            TimerMode.ONE_TIME, countdown_id, duration, on_complete=fire_and_remove
        )
        return countdown_id

    def cancel(self, countdown_id: str) -> None:
        """Remove a countdown. Unknown ids are ignored."""
        if self._countdowns.pop(countdown_id, None) is not None:
            logger.debug("Cancelled countdown %r", countdown_id)

    def clear(self) -> None:
        self._countdowns.clear()

    # --- Queries ---

    def is_one_interval_complete(self, countdown_id: str) -> bool:
        """Edge-triggered interval signal. False (and NOT_FOUND) if unknown."""
        countdown = self._lookup(countdown_id)
        if countdown is None:
            return False
        return countdown.is_one_interval_complete()

    def is_fully_complete(self, countdown_id: str) -> bool:
        """Terminal-state check. False (and NOT_FOUND) if unknown."""
        countdown = self._lookup(countdown_id)
        if countdown is None:
            return False
        return countdown.is_fully_complete()

    def status(self, countdown_id: str) -> TimerStatus | None:
        countdown = self._countdowns.get(countdown_id)
        return countdown.status if countdown is not None else None

    def get(self, countdown_id: str) -> Countdown | None:
        return self._countdowns.get(countdown_id)

    def has(self, countdown_id: str) -> bool:
        return countdown_id in self._countdowns

    def ids(self) -> list[str]:
        return list(self._countdowns)

    def __contains__(self, countdown_id: object) -> bool:
        return countdown_id in self._countdowns

    def __len__(self) -> int:
        return len(self._countdowns)

    # --- Observers ---

    def on_issue(self, handler: IssueHandler) -> None:
        """Register a handler called as ``handler(issue, countdown_id)``."""
        self._issue_handlers.append(handler)

    # --- Tick ---

    def tick(self, dt: float) -> None:
        """Advance every registered countdown by ``dt``.

        Iterates a snapshot, so callbacks may cancel or register timers.
        Entries removed or replaced earlier in the same tick are skipped;
        entries added during the tick first advance on the next one.

        A callback that raises does not stop the tick: the remaining
        countdowns still advance, later failures are logged, and the first
        exception is re-raised once every entry has been processed.
        """
        first_error: Exception | None = None
        for countdown_id, countdown in list(self._countdowns.items()):
            if self._countdowns.get(countdown_id) is not countdown:
                continue
            if not countdown.valid:
                if self.config.warn_on_invalid_tick:
                    logger.warning("Ticking invalid countdown %r", countdown_id)
                continue

            was_complete = countdown.is_fully_complete()
            if not was_complete:
                countdown.advance(dt)
            countdown.refresh_status()

            if (
                not was_complete
                and countdown.is_fully_complete()
                and countdown.on_complete is not None
            ):
                try:
                    countdown.on_complete()
                except Exception as exc:
                    if first_error is None:
                        first_error = exc
                    else:
                        logger.error(
                            "Completion callback of %r failed", countdown_id,
                            exc_info=exc,
                        )

        if first_error is not None:
            raise first_error

    # --- Internal helpers ---

    def _lookup(self, countdown_id: str) -> Countdown | None:
        countdown = self._countdowns.get(countdown_id)
        if countdown is None:
            logger.warning("No countdown registered with id %r", countdown_id)
            self._report(TimerIssue.NOT_FOUND, countdown_id)
        elif not countdown.valid:
            self._report(TimerIssue.INVALID_CONFIGURATION, countdown_id)
        return countdown

    def _report(self, issue: TimerIssue, countdown_id: str) -> None:
        for handler in self._issue_handlers:
            handler(issue, countdown_id)
