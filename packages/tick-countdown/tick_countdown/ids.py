"""Random alphanumeric ids for anonymous timers."""
from __future__ import annotations

import logging
import random as _random_mod
from typing import Container

from tick_countdown.types import IdGenerationError

logger = logging.getLogger(__name__)


class IdGenerator:
    """Random-length letter strings. Uniqueness only, not security."""

    def __init__(
        self,
        rng: _random_mod.Random,
        alphabet: str,
        min_length: int,
        max_length: int,
    ) -> None:
        self._rng = rng
        self._alphabet = alphabet
        self._min_length = min_length
        self._max_length = max_length

    def generate(self) -> str:
        length = self._rng.randint(self._min_length, self._max_length)
        return "".join(self._rng.choice(self._alphabet) for _ in range(length))

    def unique(self, taken: Container[str], max_attempts: int) -> str:
        """Generate ids until one is not in ``taken``."""
        for _ in range(max_attempts):
            candidate = self.generate()
            if candidate not in taken:
                return candidate
            logger.debug("Anonymous id %r already in use, retrying", candidate)
        raise IdGenerationError(
            f"No unused id found in {max_attempts} attempts "
            f"(alphabet size {len(self._alphabet)}, "
            f"length {self._min_length}-{self._max_length})"
        )
