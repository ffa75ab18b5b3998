"""Backoff – jittered exponential delay sequence."""
from __future__ import annotations

import dataclasses
import functools
import itertools
import math
import numbers
import random
from typing import Iterator

from reattempt.errors import InvalidConfigurationError


def _require_real(name: str, value: object, *, finite: bool = True) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidConfigurationError(name, value, "must be a real number")
    if finite and not math.isfinite(value):
        raise InvalidConfigurationError(name, value, "must be finite")


@dataclasses.dataclass(frozen=True)
class Backoff:
    """Exponential backoff between *min_delay* and *max_delay* with jitter.

    The raw delay for attempt ``n`` (counting from 0) is
    ``min_delay * factor ** n`` clamped to ``[min_delay, max_delay]``.  It is
    then scaled by a factor drawn uniformly from
    ``[1 - jitter / 2, 1 + jitter / 2]``, so the smallest possible delay is
    ``min_delay * (1 - jitter / 2)`` and the largest
    ``max_delay * (1 + jitter / 2)``.

    When ``max_delay < min_delay`` the ceiling wins and every raw delay is
    ``max_delay``.

    Instances are iterable: each ``iter()`` starts a fresh, infinite, lazy
    sequence at attempt 0.

    Example::

        # Start delay 0.05-0.15 seconds, increasing to 0.75-1.25
        bo = Backoff(min_delay=0.1, max_delay=1.0, jitter=0.5)
        bo.take(4)  # e.g. [0.1151, 0.1853, 0.4972, 0.9316]
    """

    min_delay: float = 0.02
    max_delay: float = 1.0
    jitter: float = 0.2
    factor: float = 2

    def __post_init__(self) -> None:
        _require_real("min_delay", self.min_delay)
        _require_real("max_delay", self.max_delay, finite=False)
        _require_real("jitter", self.jitter)
        _require_real("factor", self.factor)
        if self.min_delay < 0:
            raise InvalidConfigurationError("min_delay", self.min_delay, "must be >= 0")
        if math.isnan(self.max_delay) or self.max_delay < 0:
            raise InvalidConfigurationError("max_delay", self.max_delay, "must be >= 0")
        if not 0 <= self.jitter < 1:
            raise InvalidConfigurationError("jitter", self.jitter, "must be in [0, 1)")
        if self.factor <= 0:
            raise InvalidConfigurationError("factor", self.factor, "must be > 0")

    @functools.cached_property
    def jitter_range(self) -> tuple[float, float]:
        """Bounds of the multiplicative jitter draw."""
        half = self.jitter / 2
        return (1 - half, 1 + half)

    def delay_for_attempt(self, attempt: int) -> float:
        """Calculate a randomised delay for *attempt*, starting from 0."""
        if isinstance(attempt, bool) or not isinstance(attempt, int):
            raise TypeError(f"attempt must be an int, got {type(attempt).__name__}")
        if attempt < 0:
            raise ValueError(f"attempt must be >= 0, got {attempt}")
        low, high = self.jitter_range
        return self.raw_delay(attempt) * random.uniform(low, high)

    def raw_delay(self, attempt: int) -> float:
        """Un-jittered delay for *attempt*, clamped to the configured range."""
        if self.min_delay == 0 or self.factor == 1:
            raw = float(self.min_delay)
        else:
            try:
                raw = float(self.min_delay) * float(self.factor) ** attempt
            except OverflowError:
                raw = self.max_delay if self.factor > 1 else self.min_delay
        return float(min(max(raw, self.min_delay), self.max_delay))

    def produce(self) -> Iterator[float]:
        """Lazily yield ``delay_for_attempt(0)``, ``delay_for_attempt(1)``, ..."""
        return map(self.delay_for_attempt, itertools.count())

    def __iter__(self) -> Iterator[float]:
        return self.produce()

    def nth(self, attempt: int) -> float:
        return self.delay_for_attempt(attempt)

    __getitem__ = nth

    def take(self, count: int) -> list[float]:
        """Return the first *count* delays."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        return list(itertools.islice(self.produce(), count))


__all__ = ["Backoff"]
