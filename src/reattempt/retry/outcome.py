"""Retry – tagged outcome of a single attempt."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Success(Generic[T]):
    """The operation returned normally."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


class RetryableFault:
    """The operation raised a fault accepted by one of the matchers."""

    __slots__ = ("_fault",)
    __match_args__ = ("fault",)

    def __init__(self, fault: Exception) -> None:
        self._fault = fault

    @property
    def fault(self) -> Exception:
        return self._fault

    def __repr__(self) -> str:
        return f"RetryableFault({self._fault!r})"


class FatalFault:
    """The operation raised a fault no matcher accepted."""

    __slots__ = ("_fault",)
    __match_args__ = ("fault",)

    def __init__(self, fault: Exception) -> None:
        self._fault = fault

    @property
    def fault(self) -> Exception:
        return self._fault

    def __repr__(self) -> str:
        return f"FatalFault({self._fault!r})"


type Outcome[T] = Success[T] | RetryableFault | FatalFault

__all__ = ["FatalFault", "Outcome", "RetryableFault", "Success"]
