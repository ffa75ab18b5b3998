"""Retry – the retry driver."""
from __future__ import annotations

import asyncio
import dataclasses
import itertools
import logging
import time
from typing import Any, Awaitable, Callable, Iterator, TypeVar

from reattempt.backoff import Backoff, BackoffSource
from reattempt.errors import InvalidConfigurationError, RetriesExceededError
from reattempt.retry.hooks import await_hook, call_hook, ignore_fault
from reattempt.retry.matchers import FaultMatcher, MatcherSpec, coerce_matchers
from reattempt.retry.outcome import FatalFault, Outcome, RetryableFault, Success

T = TypeVar("T")
logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Retry:
    """Re-invoke an operation while it raises retryable faults.

    Parameters
    ----------
    max_attempts:
        Upper bound on operation invocations.  ``0`` raises
        :class:`RetriesExceededError` without calling the operation.
    catch:
        Exception classes, :class:`FaultMatcher` objects or predicate
        callables (one, or an iterable of them).  A fault accepted by any of
        them is retried; anything else propagates unchanged.
    backoff:
        Source of inter-attempt delays.  Only the first *max_attempts*
        values are ever drawn.
    wait_hook:
        Called with each delay.  Defaults to :func:`time.sleep` for
        :meth:`run` and :func:`asyncio.sleep` for :meth:`run_async`.
    fault_hook:
        Called with every retried fault before waiting.  Errors raised by
        either hook abort the run.  :meth:`run_async` awaits hooks that
        return awaitables; :meth:`run` rejects them with :class:`TypeError`.

    Every matching fault is followed by one fault-hook call and one wait,
    including the fault of the final attempt.

    Example::

        retry = Retry(max_attempts=5, catch=TempError, backoff=Backoff(0.1, 1.0, 0.5))
        try:
            retry.run(lambda attempt: fetch(attempt))
        except RetriesExceededError as exc:
            print(exc.cause)  # TempError from attempt 5
    """

    max_attempts: int = 5
    catch: tuple[FaultMatcher, ...] | MatcherSpec = (Exception,)
    backoff: BackoffSource = dataclasses.field(default_factory=Backoff)
    wait_hook: Callable[[float], Any] | None = None
    fault_hook: Callable[[BaseException], Any] = ignore_fault

    def __post_init__(self) -> None:
        if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int):
            raise InvalidConfigurationError("max_attempts", self.max_attempts, "must be an integer")
        if self.max_attempts < 0:
            raise InvalidConfigurationError("max_attempts", self.max_attempts, "must be >= 0")
        object.__setattr__(self, "catch", coerce_matchers(self.catch))
        if not isinstance(self.backoff, BackoffSource):
            raise InvalidConfigurationError("backoff", self.backoff, "must be iterable")
        if self.wait_hook is not None and not callable(self.wait_hook):
            raise InvalidConfigurationError("wait_hook", self.wait_hook, "must be callable")
        if not callable(self.fault_hook):
            raise InvalidConfigurationError("fault_hook", self.fault_hook, "must be callable")

    def matches(self, fault: BaseException) -> bool:
        """Return ``True`` when any configured matcher accepts *fault*."""
        return any(matcher.matches(fault) for matcher in self.catch)  # type: ignore[union-attr]

    def _delays(self) -> Iterator[float]:
        return itertools.islice(iter(self.backoff), self.max_attempts)

    def _classify(self, fault: Exception) -> Outcome[Any]:
        if self.matches(fault):
            return RetryableFault(fault)
        return FatalFault(fault)

    def _attempt(self, operation: Callable[[int], T], number: int) -> Outcome[T]:
        try:
            return Success(operation(number))
        except Exception as exc:
            return self._classify(exc)

    async def _attempt_async(
        self, operation: Callable[[int], Awaitable[T]], number: int
    ) -> Outcome[T]:
        try:
            return Success(await operation(number))
        except Exception as exc:
            return self._classify(exc)

    def _exhausted(self, attempts: int, last_fault: Exception | None) -> RetriesExceededError:
        logger.debug(
            "retry.exhausted",
            extra={"attempts": attempts, "error": repr(last_fault)},
        )
        return RetriesExceededError(attempts, cause=last_fault)

    def _log_failed(self, attempt: int, delay: float, fault: Exception) -> None:
        logger.debug(
            "retry.attempt_failed",
            extra={
                "attempt": attempt,
                "max_attempts": self.max_attempts,
                "delay": delay,
                "error": repr(fault),
            },
        )

    def run(self, operation: Callable[[int], T]) -> T:
        """Call ``operation(attempt)`` (attempt counts from 1) until it succeeds.

        Returns the first successful result.  Raises the operation's own
        exception when no matcher accepts it, or
        :class:`RetriesExceededError` (``cause`` = last fault) once the
        attempts are used up.
        """
        wait = self.wait_hook or time.sleep
        last_fault: Exception | None = None
        attempts = 0
        for attempts, delay in enumerate(self._delays(), start=1):
            match self._attempt(operation, attempts):
                case Success(value):
                    return value
                case FatalFault(fault):
                    logger.debug("retry.fatal", extra={"attempt": attempts, "error": repr(fault)})
                    raise fault
                case RetryableFault(fault):
                    last_fault = fault
                    self._log_failed(attempts, delay, fault)
                    call_hook(self.fault_hook, fault, name="fault_hook")
                    call_hook(wait, delay, name="wait_hook")
        raise self._exhausted(attempts, last_fault)

    async def run_async(self, operation: Callable[[int], Awaitable[T]]) -> T:
        """Asynchronous :meth:`run`; hooks may return awaitables."""
        wait = self.wait_hook or asyncio.sleep
        last_fault: Exception | None = None
        attempts = 0
        for attempts, delay in enumerate(self._delays(), start=1):
            match await self._attempt_async(operation, attempts):
                case Success(value):
                    return value
                case FatalFault(fault):
                    logger.debug("retry.fatal", extra={"attempt": attempts, "error": repr(fault)})
                    raise fault
                case RetryableFault(fault):
                    last_fault = fault
                    self._log_failed(attempts, delay, fault)
                    await await_hook(self.fault_hook, fault)
                    await await_hook(wait, delay)
        raise self._exhausted(attempts, last_fault)


__all__ = ["Retry", "ignore_fault"]
