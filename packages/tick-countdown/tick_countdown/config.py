"""Registry configuration dataclass."""
from __future__ import annotations

import string
from dataclasses import dataclass


@dataclass(frozen=True)
class RegistryConfig:
    """Immutable configuration for a TimerRegistry.

    Attributes:
        id_alphabet: Characters used for anonymous timer ids.
        id_min_length: Shortest anonymous id.
        id_max_length: Longest anonymous id (inclusive).
        id_max_attempts: Collision retries before giving up.
        warn_on_invalid_tick: Log when tick() meets an invalid countdown.
    """

    id_alphabet: str = string.ascii_uppercase + string.ascii_lowercase
    id_min_length: int = 1
    id_max_length: int = 25
    id_max_attempts: int = 1000
    warn_on_invalid_tick: bool = True

    def __post_init__(self) -> None:
        if not self.id_alphabet:
            raise ValueError("id_alphabet must not be empty")
        if self.id_min_length <= 0:
            raise ValueError("id_min_length must be positive")
        if self.id_max_length < self.id_min_length:
            raise ValueError("id_max_length must be >= id_min_length")
        if self.id_max_attempts <= 0:
            raise ValueError("id_max_attempts must be positive")
