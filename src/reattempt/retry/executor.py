"""Retry – decorator-friendly wrapper around ``Retry``."""
from __future__ import annotations

import functools
import inspect
from typing import Any, Callable

from reattempt.retry.driver import Retry


class RetryExecutor:
    """Run every call of the decorated function under a :class:`Retry`.

    Coroutine functions are driven by :meth:`Retry.run_async`, everything
    else by :meth:`Retry.run`.  The wrapped function does not receive the
    attempt number.

    Usage::

        @RetryExecutor(Retry(max_attempts=3, catch=ConnectionError))
        def fetch(url: str) -> bytes: ...
    """

    def __init__(self, retry: Retry | None = None) -> None:
        self._retry = retry or Retry()

    @property
    def retry(self) -> Retry:
        return self._retry

    def __call__(self, func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await self._retry.run_async(lambda _attempt: func(*args, **kwargs))

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return self._retry.run(lambda _attempt: func(*args, **kwargs))

        return wrapper


__all__ = ["RetryExecutor"]
