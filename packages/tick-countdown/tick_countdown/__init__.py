"""tick-countdown - Named countdown timers advanced by a fixed tick."""
from __future__ import annotations

from tick_countdown.config import RegistryConfig
from tick_countdown.countdown import (
    Countdown,
    EmptyCountdown,
    MultiCountdown,
    RepeatingCountdown,
    SingleCountdown,
)
from tick_countdown.driver import TickDriver
from tick_countdown.factory import CountdownFactory
from tick_countdown.ids import IdGenerator
from tick_countdown.registry import TimerRegistry
from tick_countdown.types import (
    Callback,
    IdGenerationError,
    IssueHandler,
    TimerIssue,
    TimerMode,
    TimerStatus,
)

__all__ = [
    "Callback",
    "Countdown",
    "CountdownFactory",
    "EmptyCountdown",
    "IdGenerationError",
    "IdGenerator",
    "IssueHandler",
    "MultiCountdown",
    "RegistryConfig",
    "RepeatingCountdown",
    "SingleCountdown",
    "TickDriver",
    "TimerIssue",
    "TimerMode",
    "TimerRegistry",
    "TimerStatus",
]
