"""TickDriver - fixed-rate loop that feeds a TimerRegistry."""
from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from tick_countdown.registry import TimerRegistry

logger = logging.getLogger(__name__)

Hook = Callable[["TickDriver"], None]


class TickDriver:
    """Calls ``registry.tick(dt)`` once per fixed interval of ``1 / tps``.

    ``step`` and ``run`` advance without sleeping, for tests and
    simulations; ``run_forever`` paces ticks against the monotonic clock.
    ``tick_number`` counts completed ticks and is already incremented while
    timer callbacks of that tick run.
    """

    def __init__(self, registry: TimerRegistry, tps: int = 50) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._registry = registry
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested = False

    @property
    def registry(self) -> TimerRegistry:
        return self._registry

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        """Simulated seconds fed to the registry so far."""
        return self._tick_number * self._dt

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def request_stop(self) -> None:
        """Stop after the current tick. Safe to call from a timer callback."""
        self._stop_requested = True

    def _tick(self) -> None:
        self._tick_number += 1
        self._registry.tick(self._dt)

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        for hook in self._start_hooks:
            hook(self)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        for hook in self._stop_hooks:
            hook(self)

    def run_forever(self) -> None:
        self._stop_requested = False
        for hook in self._start_hooks:
            hook(self)

        logger.debug("Driving registry at %d ticks per second", self._tps)
        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            sleep_time = self._dt - (time.monotonic() - start)
            if sleep_time > 0:
                time.sleep(sleep_time)

        for hook in self._stop_hooks:
            hook(self)
