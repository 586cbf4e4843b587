"""Shared enums, type aliases and errors for tick-countdown."""
from __future__ import annotations

from enum import Enum
from typing import Callable


class TimerMode(Enum):
    ONE_TIME = "one_time"
    MULTI_TIME = "multi_time"
    REPEAT = "repeat"


class TimerStatus(Enum):
    BEGINNING = "beginning"
    IN_PROCESS = "in_process"
    FULLY_COMPLETE = "fully_complete"


class TimerIssue(Enum):
    """Non-fatal conditions reported by the registry. Never raised."""

    NOT_FOUND = "not_found"
    INVALID_CONFIGURATION = "invalid_configuration"


Callback = Callable[[], None]
IssueHandler = Callable[[TimerIssue, str], None]


class IdGenerationError(RuntimeError):
    """Raised when no unused anonymous id is found within the attempt budget."""
