"""conftest.py for benchmarks.

``run_async`` drives coroutines on one session-scoped event loop so the
loop start-up cost stays out of ``Retry.run_async`` timings.
"""

from __future__ import annotations

import asyncio

import pytest


@pytest.fixture(scope="session")
def event_loop():
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture(scope="session")
def run_async(event_loop):
    def _run(coro):
        return event_loop.run_until_complete(coro)

    return _run
