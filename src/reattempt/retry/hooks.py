"""Retry – invoking wait and fault hooks from sync and async loops.

A hook is any callable.  Async loops await whatever it returns when that is
awaitable, so plain functions and coroutine functions both work there.  Sync
loops cannot wait on an awaitable and reject it with :class:`TypeError`.
"""
from __future__ import annotations

import inspect
from typing import Any, Callable


def ignore_fault(fault: BaseException) -> None:  # noqa: ARG001
    """Default fault hook: observe nothing."""


def call_hook(hook: Callable[[Any], Any], arg: Any, *, name: str) -> Any:
    """Call *hook* from a synchronous loop."""
    result = hook(arg)
    if inspect.isawaitable(result):
        if inspect.iscoroutine(result):
            result.close()
        raise TypeError(f"{name} returned an awaitable; use the async entry point")
    return result


async def await_hook(hook: Callable[[Any], Any], arg: Any) -> Any:
    """Call *hook* from an async loop, awaiting its result when awaitable."""
    result = hook(arg)
    if inspect.isawaitable(result):
        return await result
    return result


__all__ = ["await_hook", "call_hook", "ignore_fault"]
