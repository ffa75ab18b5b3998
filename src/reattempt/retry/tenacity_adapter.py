"""Retry – tenacity interoperability.

``BackoffWait`` lets a :class:`~reattempt.backoff.Backoff` drive any
``tenacity`` retrying loop, and ``TenacityRetryPolicy.from_retry`` turns a
:class:`~reattempt.retry.driver.Retry` into the equivalent
``tenacity.Retrying`` configuration.

Tenacity's own sequencing applies: it does not wait after the last attempt,
and with ``reraise=True`` exhaustion re-raises the last fault instead of
:class:`~reattempt.errors.RetriesExceededError`.
"""
from __future__ import annotations

import time
from collections.abc import Sized
from typing import Any, Awaitable, Callable, TypeVar

import tenacity
from tenacity.wait import wait_base

from reattempt.backoff import Backoff, BackoffSource, ConstantBackoff, FixedBackoff
from reattempt.errors import InvalidConfigurationError
from reattempt.retry.driver import Retry
from reattempt.retry.hooks import await_hook, call_hook

T = TypeVar("T")


class BackoffWait(wait_base):
    """tenacity wait strategy drawing delays from a :class:`Backoff`.

    Tenacity numbers attempts from 1; the first wait uses
    ``backoff.delay_for_attempt(0)``.
    """

    def __init__(self, backoff: Backoff) -> None:
        self.backoff = backoff

    def __call__(self, retry_state: tenacity.RetryCallState) -> float:
        return self.backoff.delay_for_attempt(retry_state.attempt_number - 1)


def wait_for(source: BackoffSource) -> wait_base:
    """Translate a backoff source into a tenacity wait strategy."""
    if isinstance(source, Backoff):
        return BackoffWait(source)
    if isinstance(source, ConstantBackoff):
        return tenacity.wait_fixed(source.delay)
    if isinstance(source, FixedBackoff):
        return tenacity.wait_chain(*(tenacity.wait_fixed(d) for d in source.delays))
    raise TypeError(f"No tenacity wait strategy for {type(source).__name__}")


class TenacityRetryPolicy:
    """Retry policy backed by the ``tenacity`` library.

    Parameters
    ----------
    max_attempts:
        Maximum number of call attempts (including the first call).
    wait:
        A ``tenacity`` wait strategy.  Defaults to ``BackoffWait(Backoff())``.
    retry:
        A ``tenacity`` retry predicate.  Defaults to retrying any
        ``Exception``.
    reraise:
        Whether to re-raise the original exception after all attempts are
        exhausted.  Defaults to ``True``.
    wait_hook:
        Called with each delay instead of sleeping.  :meth:`execute_async`
        awaits its result when awaitable; :meth:`execute` rejects awaitables
        with :class:`TypeError`.
    fault_hook:
        Called with each fault that is about to be retried, under the same
        sync/async rules as *wait_hook*.
    kwargs:
        Forwarded to :class:`tenacity.Retrying` /
        :class:`tenacity.AsyncRetrying` and take precedence over the hooks.
    """

    def __init__(
        self,
        max_attempts: int = 5,
        wait: Any = None,
        retry: Any = None,
        reraise: bool = True,
        *,
        wait_hook: Callable[[float], Any] | None = None,
        fault_hook: Callable[[BaseException], Any] | None = None,
        **kwargs: Any,
    ) -> None:
        if max_attempts < 1:
            raise InvalidConfigurationError(
                "max_attempts", max_attempts, "tenacity always makes at least one attempt"
            )
        self._max_attempts = max_attempts
        self._wait = wait or BackoffWait(Backoff())
        self._retry = retry or tenacity.retry_if_exception_type(Exception)
        self._reraise = reraise
        self._wait_hook = wait_hook
        self._fault_hook = fault_hook
        self._extra_kwargs = kwargs

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @classmethod
    def from_retry(cls, retry: Retry, *, reraise: bool = True) -> TenacityRetryPolicy:
        """Mirror *retry*'s budget, matchers, backoff and hooks.

        A sized backoff source shorter than ``retry.max_attempts`` caps the
        budget, as it does for :meth:`Retry.run`.
        """
        budget = retry.max_attempts
        if isinstance(retry.backoff, Sized):
            budget = min(budget, len(retry.backoff))
        return cls(
            max_attempts=budget,
            wait=wait_for(retry.backoff),
            retry=tenacity.retry_if_exception(retry.matches),
            reraise=reraise,
            wait_hook=retry.wait_hook,
            fault_hook=retry.fault_hook,
        )

    def _sync_hooks(self) -> dict[str, Any]:
        wait_hook, fault_hook = self._wait_hook, self._fault_hook
        hooks: dict[str, Any] = {"sleep": time.sleep}
        if wait_hook is not None:
            hooks["sleep"] = lambda delay: call_hook(wait_hook, delay, name="wait_hook")
        if fault_hook is not None:

            def _before_sleep(retry_state: tenacity.RetryCallState) -> None:
                call_hook(fault_hook, _fault_of(retry_state), name="fault_hook")

            hooks["before_sleep"] = _before_sleep
        return hooks

    def _async_hooks(self) -> dict[str, Any]:
        wait_hook, fault_hook = self._wait_hook, self._fault_hook
        hooks: dict[str, Any] = {}
        if wait_hook is not None:

            async def _sleep(delay: float) -> None:
                await await_hook(wait_hook, delay)

            hooks["sleep"] = _sleep
        if fault_hook is not None:

            async def _before_sleep(retry_state: tenacity.RetryCallState) -> None:
                await await_hook(fault_hook, _fault_of(retry_state))

            hooks["before_sleep"] = _before_sleep
        return hooks

    def _build_retrying(self) -> tenacity.Retrying:
        return tenacity.Retrying(
            stop=tenacity.stop_after_attempt(self._max_attempts),
            wait=self._wait,
            retry=self._retry,
            reraise=self._reraise,
            **{**self._sync_hooks(), **self._extra_kwargs},
        )

    def _build_async_retrying(self) -> tenacity.AsyncRetrying:
        return tenacity.AsyncRetrying(
            stop=tenacity.stop_after_attempt(self._max_attempts),
            wait=self._wait,
            retry=self._retry,
            reraise=self._reraise,
            **{**self._async_hooks(), **self._extra_kwargs},
        )

    def execute(self, func: Callable[[], T]) -> T:
        """Execute *func* synchronously with tenacity retry."""
        return self._build_retrying()(func)

    async def execute_async(self, func: Callable[[], Awaitable[T]]) -> T:
        """Execute *func* asynchronously with tenacity retry."""
        async for attempt in self._build_async_retrying():
            with attempt:
                result = await func()
        return result  # type: ignore[return-value]


def _fault_of(retry_state: tenacity.RetryCallState) -> BaseException | None:
    return retry_state.outcome.exception() if retry_state.outcome is not None else None


__all__ = ["BackoffWait", "TenacityRetryPolicy", "wait_for"]
