"""Backoff – the delay-source port and simple fixed schedules."""
from __future__ import annotations

import dataclasses
import itertools
from typing import Iterable, Iterator, Protocol, runtime_checkable


@runtime_checkable
class BackoffSource(Protocol):
    """Port: anything producing a lazy, restartable sequence of delays.

    Each call to ``iter()`` must start again from the first delay.
    """

    def __iter__(self) -> Iterator[float]: ...


@dataclasses.dataclass(frozen=True)
class ConstantBackoff:
    """Infinite source repeating the same *delay*."""

    delay: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return itertools.repeat(self.delay)


@dataclasses.dataclass(frozen=True, init=False)
class FixedBackoff:
    """Finite, explicit delay schedule.

    A retry driven by a ``FixedBackoff`` makes at most ``len(delays)``
    attempts, whatever its configured ``max_attempts``.
    """

    delays: tuple[float, ...]

    def __init__(self, delays: Iterable[float]) -> None:
        object.__setattr__(self, "delays", tuple(delays))

    def __iter__(self) -> Iterator[float]:
        return iter(self.delays)

    def __len__(self) -> int:
        return len(self.delays)


__all__ = ["BackoffSource", "ConstantBackoff", "FixedBackoff"]
