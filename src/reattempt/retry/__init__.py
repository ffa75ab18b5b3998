"""Retry – driver, fault matchers and tenacity interop."""
from reattempt.retry.driver import Retry, ignore_fault
from reattempt.retry.executor import RetryExecutor
from reattempt.retry.matchers import FaultMatcher, InstanceOf, Predicate, coerce_matchers
from reattempt.retry.outcome import FatalFault, Outcome, RetryableFault, Success
from reattempt.retry.tenacity_adapter import BackoffWait, TenacityRetryPolicy, wait_for

__all__ = [
    "BackoffWait",
    "FatalFault",
    "FaultMatcher",
    "InstanceOf",
    "Outcome",
    "Predicate",
    "Retry",
    "RetryExecutor",
    "RetryableFault",
    "Success",
    "TenacityRetryPolicy",
    "coerce_matchers",
    "ignore_fault",
    "wait_for",
]
