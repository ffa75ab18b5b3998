"""Testing – in-memory doubles for retry hooks and operations.

Hypothesis strategies live in :mod:`reattempt.testing.strategies`.
"""
from reattempt.testing.fakes import (
    AsyncFailingOperation,
    FailingOperation,
    RecordingFaultHook,
    RecordingWaitHook,
)

__all__ = ["AsyncFailingOperation", "FailingOperation", "RecordingFaultHook", "RecordingWaitHook"]
