"""
reattempt – retry with jittered exponential backoff.

Import path convention::

    from reattempt import Backoff, Retry, RetriesExceededError
    from reattempt.retry import InstanceOf, Predicate, RetryExecutor
    from reattempt.config import EnvSettingsLoader, RetrySettings
"""

from reattempt.backoff import Backoff, BackoffSource, ConstantBackoff, FixedBackoff
from reattempt.errors import InvalidConfigurationError, ReattemptError, RetriesExceededError
from reattempt.retry import FaultMatcher, InstanceOf, Predicate, Retry, RetryExecutor

__version__ = "0.1.0"
__all__ = [
    "Backoff",
    "BackoffSource",
    "ConstantBackoff",
    "FaultMatcher",
    "FixedBackoff",
    "InstanceOf",
    "InvalidConfigurationError",
    "Predicate",
    "ReattemptError",
    "RetriesExceededError",
    "Retry",
    "RetryExecutor",
    "__version__",
]
