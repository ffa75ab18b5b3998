"""Benchmark: Retry.run / Retry.run_async overhead.

Compares:
- Bare ``fn(1)`` (baseline – no retry wrapper)
- ``Retry(max_attempts=1).run(fn)`` – single attempt, zero retries
- ``Retry(max_attempts=5).run(fn)`` – succeeds on first try
- ``Backoff.take(100)`` – cost of drawing jittered delays

Goal: quantify the bookkeeping overhead of the retry driver itself.
"""

from __future__ import annotations

from reattempt.backoff import Backoff, ConstantBackoff
from reattempt.retry import Retry
from reattempt.testing import FailingOperation


def _ok(attempt: int) -> str:
    return "ok"


async def _ok_async(attempt: int) -> str:
    return "ok"


def test_bare_call_baseline(benchmark):
    result = benchmark(_ok, 1)
    assert result == "ok"


def test_retry_max_1(benchmark):
    retry = Retry(max_attempts=1)
    result = benchmark(retry.run, _ok)
    assert result == "ok"


def test_retry_max_5_no_retries(benchmark):
    retry = Retry(max_attempts=5)
    result = benchmark(retry.run, _ok)
    assert result == "ok"


def test_retry_three_failures(benchmark):
    """Two retried faults per call; waits are no-ops."""
    retry = Retry(max_attempts=3, backoff=ConstantBackoff(0), wait_hook=lambda delay: None)

    def run():
        return retry.run(FailingOperation(lambda n: OSError(n), failures=2, result="ok"))

    assert benchmark(run) == "ok"


def test_retry_async_no_retries(benchmark, run_async):
    retry = Retry(max_attempts=5)
    result = benchmark(lambda: run_async(retry.run_async(_ok_async)))
    assert result == "ok"


def test_backoff_take_100(benchmark):
    bo = Backoff()
    delays = benchmark(bo.take, 100)
    assert len(delays) == 100
