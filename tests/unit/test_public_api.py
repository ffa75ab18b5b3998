"""Public surface smoke tests."""

from __future__ import annotations

import importlib

import pytest

import reattempt


@pytest.mark.parametrize(
    "module_name",
    [
        "reattempt",
        "reattempt.backoff",
        "reattempt.config",
        "reattempt.errors",
        "reattempt.observability",
        "reattempt.retry",
        "reattempt.testing",
        "reattempt.testing.strategies",
    ],
)
def test_all_symbols_importable(module_name: str) -> None:
    mod = importlib.import_module(module_name)
    for name in mod.__all__:
        assert hasattr(mod, name), f"{name!r} missing from {module_name}"


def test_version() -> None:
    assert reattempt.__version__ == "0.1.0"


def test_end_to_end_example() -> None:
    class TempError(Exception):
        pass

    waits: list[float] = []
    retry = reattempt.Retry(
        max_attempts=5,
        catch=TempError,
        backoff=reattempt.Backoff(min_delay=0.1, max_delay=1.0, jitter=0.5),
        wait_hook=waits.append,
    )

    def operation(attempt: int) -> None:
        raise TempError(f"Failed in attempt {attempt}")

    with pytest.raises(reattempt.RetriesExceededError) as exc_info:
        retry.run(operation)
    assert str(exc_info.value.cause) == "Failed in attempt 5"
    assert len(waits) == 5
    assert all(0.05 <= delay <= 1.25 for delay in waits)
