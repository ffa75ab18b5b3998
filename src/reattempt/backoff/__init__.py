"""Backoff – delay sequences consumed by the retry driver."""
from reattempt.backoff.sequence import Backoff
from reattempt.backoff.source import BackoffSource, ConstantBackoff, FixedBackoff

__all__ = ["Backoff", "BackoffSource", "ConstantBackoff", "FixedBackoff"]
