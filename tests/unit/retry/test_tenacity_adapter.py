"""Unit tests for tenacity interoperability."""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock

import pytest
import tenacity
from tenacity.wait import wait_base

from reattempt.backoff import Backoff, ConstantBackoff, FixedBackoff
from reattempt.errors import InvalidConfigurationError, RetriesExceededError
from reattempt.retry import BackoffWait, Retry, TenacityRetryPolicy, wait_for
from reattempt.testing import (
    AsyncFailingOperation,
    FailingOperation,
    RecordingFaultHook,
    RecordingWaitHook,
)


class TempError(Exception):
    pass


def _state(attempt_number: int) -> MagicMock:
    state = MagicMock()
    state.attempt_number = attempt_number
    return state


class TestBackoffWait:
    def test_first_wait_uses_attempt_zero(self) -> None:
        wait = BackoffWait(Backoff(min_delay=0.1, max_delay=1.0, jitter=0.0))
        assert [wait(_state(n)) for n in range(1, 6)] == [0.1, 0.2, 0.4, 0.8, 1.0]

    def test_is_tenacity_wait(self) -> None:
        assert isinstance(BackoffWait(Backoff()), wait_base)


class TestWaitFor:
    def test_backoff(self) -> None:
        assert isinstance(wait_for(Backoff()), BackoffWait)

    def test_constant(self) -> None:
        assert wait_for(ConstantBackoff(0.3))(_state(4)) == 0.3

    def test_fixed_schedule(self) -> None:
        wait = wait_for(FixedBackoff([0.1, 0.5]))
        assert [wait(_state(n)) for n in (1, 2, 3)] == [0.1, 0.5, 0.5]

    def test_unknown_source(self) -> None:
        with pytest.raises(TypeError):
            wait_for([0.1, 0.2])  # type: ignore[arg-type]


class TestTenacityRetryPolicy:
    def test_from_retry_succeeds_after_failures(self) -> None:
        wait = RecordingWaitHook()
        faults = RecordingFaultHook()
        retry = Retry(
            max_attempts=3,
            catch=TempError,
            backoff=Backoff(min_delay=0.1, max_delay=1.0, jitter=0.0),
            wait_hook=wait,
            fault_hook=faults,
        )
        op = FailingOperation(lambda n: TempError(n), failures=2, result="ok")
        policy = TenacityRetryPolicy.from_retry(retry)
        assert policy.execute(lambda: op(op.call_count + 1)) == "ok"
        assert op.call_count == 3
        assert wait.delays == [0.1, 0.2]
        assert faults.faults == op.raised

    def test_exhaustion_reraises_last_fault(self) -> None:
        retry = Retry(max_attempts=2, catch=TempError, backoff=ConstantBackoff(0), wait_hook=RecordingWaitHook())
        op = FailingOperation(lambda n: TempError(n))
        with pytest.raises(TempError) as exc_info:
            TenacityRetryPolicy.from_retry(retry).execute(lambda: op(op.call_count + 1))
        assert exc_info.value is op.raised[-1]
        assert op.call_count == 2

    def test_non_matching_fault_is_not_retried(self) -> None:
        retry = Retry(max_attempts=5, catch=TempError, backoff=ConstantBackoff(0), wait_hook=RecordingWaitHook())
        op = FailingOperation(lambda n: KeyError(n))
        with pytest.raises(KeyError):
            TenacityRetryPolicy.from_retry(retry).execute(lambda: op(op.call_count + 1))
        assert op.call_count == 1

    def test_zero_attempts_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            TenacityRetryPolicy.from_retry(Retry(max_attempts=0))

    def test_async_execution(self) -> None:
        calls = 0

        async def op() -> str:
            nonlocal calls
            calls += 1
            if calls < 2:
                raise TempError("later")
            return "done"

        async def fake_sleep(delay: float) -> None:
            pass

        policy = TenacityRetryPolicy(
            max_attempts=3,
            wait=tenacity.wait_fixed(0),
            retry=tenacity.retry_if_exception_type(TempError),
            sleep=fake_sleep,
        )
        assert asyncio.run(policy.execute_async(op)) == "done"
        assert calls == 2

    def test_from_retry_async_with_sync_hooks(self) -> None:
        wait = RecordingWaitHook()
        faults = RecordingFaultHook()
        retry = Retry(
            max_attempts=3,
            catch=TempError,
            backoff=Backoff(min_delay=0.1, max_delay=1.0, jitter=0.0),
            wait_hook=wait,
            fault_hook=faults,
        )
        op = AsyncFailingOperation(lambda n: TempError(n), failures=2, result="ok")
        policy = TenacityRetryPolicy.from_retry(retry)
        assert asyncio.run(policy.execute_async(lambda: op(op.call_count + 1))) == "ok"
        assert op.call_count == 3
        assert wait.delays == [0.1, 0.2]
        assert faults.faults == op.raised

    def test_from_retry_async_awaits_async_hooks(self) -> None:
        events: list[object] = []

        async def wait_hook(delay: float) -> None:
            events.append(delay)

        async def fault_hook(fault: BaseException) -> None:
            events.append(fault)

        retry = Retry(
            max_attempts=2,
            catch=TempError,
            backoff=ConstantBackoff(0.25),
            wait_hook=wait_hook,
            fault_hook=fault_hook,
        )
        op = AsyncFailingOperation(lambda n: TempError(n), failures=1, result=7)
        assert asyncio.run(TenacityRetryPolicy.from_retry(retry).execute_async(lambda: op(op.call_count + 1))) == 7
        assert events == [op.raised[0], 0.25]

    def test_sync_execute_rejects_async_wait_hook(self) -> None:
        async def wait_hook(delay: float) -> None:
            pass

        retry = Retry(max_attempts=2, catch=TempError, backoff=ConstantBackoff(0), wait_hook=wait_hook)
        op = FailingOperation(lambda n: TempError(n), failures=1, result="ok")
        with pytest.raises(TypeError, match="wait_hook"):
            TenacityRetryPolicy.from_retry(retry).execute(lambda: op(op.call_count + 1))
        assert op.call_count == 1

    def test_fixed_backoff_caps_budget_like_the_driver(self) -> None:
        retry = Retry(
            max_attempts=10,
            catch=TempError,
            backoff=FixedBackoff([0.1, 0.2]),
            wait_hook=RecordingWaitHook(),
        )
        driven = FailingOperation(lambda n: TempError(n))
        with pytest.raises(RetriesExceededError):
            retry.run(driven)

        policy = TenacityRetryPolicy.from_retry(retry)
        op = FailingOperation(lambda n: TempError(n))
        with pytest.raises(TempError):
            policy.execute(lambda: op(op.call_count + 1))
        assert policy.max_attempts == 2
        assert op.call_count == driven.call_count == 2

    def test_unsized_source_keeps_budget(self) -> None:
        policy = TenacityRetryPolicy.from_retry(Retry(max_attempts=4, backoff=ConstantBackoff(0)))
        assert policy.max_attempts == 4

    def test_empty_fixed_backoff_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            TenacityRetryPolicy.from_retry(Retry(backoff=FixedBackoff([])))
