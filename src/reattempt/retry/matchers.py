"""Retry – fault matchers deciding which exceptions are retried."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Iterable, Protocol, runtime_checkable

from reattempt.errors import InvalidConfigurationError


@runtime_checkable
class FaultMatcher(Protocol):
    """Port: answers whether a raised fault qualifies for another attempt."""

    def matches(self, fault: BaseException) -> bool: ...


@dataclasses.dataclass(frozen=True, init=False)
class InstanceOf:
    """Match faults that are instances of any of *kinds* (subclasses included)."""

    kinds: tuple[type[BaseException], ...]

    def __init__(self, *kinds: type[BaseException]) -> None:
        if not kinds:
            raise InvalidConfigurationError("kinds", kinds, "at least one exception class is required")
        for kind in kinds:
            if not (isinstance(kind, type) and issubclass(kind, BaseException)):
                raise InvalidConfigurationError("kinds", kind, "must be an exception class")
        object.__setattr__(self, "kinds", kinds)

    def matches(self, fault: BaseException) -> bool:
        return isinstance(fault, self.kinds)


@dataclasses.dataclass(frozen=True)
class Predicate:
    """Match faults for which *func* returns a truthy value.

    Example::

        Predicate(lambda exc: getattr(exc, "status_code", 0) >= 500)
    """

    func: Callable[[BaseException], Any]

    def matches(self, fault: BaseException) -> bool:
        return bool(self.func(fault))


type MatcherSpec = type[BaseException] | FaultMatcher | Callable[[BaseException], Any]


def _coerce_one(item: Any) -> FaultMatcher:
    if isinstance(item, type):
        if issubclass(item, BaseException):
            return InstanceOf(item)
        raise InvalidConfigurationError("catch", item, "classes must derive from BaseException")
    if isinstance(item, FaultMatcher):
        return item
    if callable(item):
        return Predicate(item)
    raise InvalidConfigurationError(
        "catch", item, "expected an exception class, a FaultMatcher or a callable"
    )


def coerce_matchers(value: MatcherSpec | Iterable[MatcherSpec]) -> tuple[FaultMatcher, ...]:
    """Normalise a single matcher spec or an iterable of them into matchers."""
    if isinstance(value, type) or isinstance(value, FaultMatcher) or callable(value):
        items: list[Any] = [value]
    elif isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        items = list(value)
    else:
        raise InvalidConfigurationError(
            "catch", value, "expected an exception class, a FaultMatcher, a callable or an iterable of those"
        )
    if not items:
        raise InvalidConfigurationError("catch", value, "at least one matcher is required")
    return tuple(_coerce_one(item) for item in items)


__all__ = ["FaultMatcher", "InstanceOf", "MatcherSpec", "Predicate", "coerce_matchers"]
