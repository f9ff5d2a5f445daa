"""
Exponential backoff counter.

Each call to ``duration()`` returns the delay for the current attempt and
advances the counter. Delays grow as ``min_delay * factor ** attempt``,
bounded by ``max_delay``; with jitter the delay is drawn uniformly between
``min_delay`` and that bound.
"""

from __future__ import annotations

import random

_DEFAULT_FACTOR = 2.0


class Backoff:
    """Exponential backoff with optional jitter.

    Example:
        >>> backoff = Backoff(min_delay=2.0, max_delay=300.0)
        >>> backoff.duration(), backoff.duration(), backoff.duration()
        (2.0, 4.0, 8.0)
    """

    def __init__(
        self,
        min_delay: float,
        max_delay: float,
        factor: float = _DEFAULT_FACTOR,
        jitter: bool = False,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize backoff.

        Args:
            min_delay: Delay of the first attempt in seconds
            max_delay: Upper bound for any delay in seconds
            factor: Growth factor per attempt; non-positive values use 2
            jitter: Randomize delays between min_delay and the computed delay
            rng: Random source used for jitter
        """
        self.min_delay = min_delay
        self.max_delay = max_delay
        self.factor = factor if factor > 0 else _DEFAULT_FACTOR
        self.jitter = jitter
        self._rng = rng or random.Random()
        self._attempt = 0

    @property
    def attempt(self) -> int:
        """Number of delays handed out since the last reset."""
        return self._attempt

    def for_attempt(self, attempt: int) -> float:
        """Calculate the delay for ``attempt`` (0-based) in seconds."""
        if self.min_delay >= self.max_delay:
            return self.max_delay

        try:
            delay = self.min_delay * (self.factor ** attempt)
        except OverflowError:
            return self.max_delay

        if self.jitter:
            delay = self._rng.random() * (delay - self.min_delay) + self.min_delay

        if delay < self.min_delay:
            return self.min_delay
        if delay > self.max_delay:
            return self.max_delay
        return delay

    def duration(self) -> float:
        """Return the delay for the current attempt and advance."""
        delay = self.for_attempt(self._attempt)
        self._attempt += 1
        return delay

    def reset(self) -> None:
        """Restart from the first attempt."""
        self._attempt = 0
