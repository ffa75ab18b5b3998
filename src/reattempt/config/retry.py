"""Config settings – RetrySettings."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar

from reattempt.backoff import Backoff
from reattempt.config.base import Settings
from reattempt.retry import Retry


@dataclasses.dataclass
class RetrySettings(Settings):
    """Backoff and attempt budget, loadable from ``REATTEMPT_*`` variables.

    ``REATTEMPT_MIN_DELAY``, ``REATTEMPT_MAX_DELAY``, ``REATTEMPT_JITTER``,
    ``REATTEMPT_FACTOR`` and ``REATTEMPT_MAX_ATTEMPTS``.
    """

    _prefix: ClassVar[str] = "REATTEMPT"

    min_delay: float = 0.02
    max_delay: float = 1.0
    jitter: float = 0.2
    factor: float = 2.0
    max_attempts: int = 5

    def _validate(self) -> None:
        self.build_retry()

    def build_backoff(self) -> Backoff:
        return Backoff(
            min_delay=self.min_delay,
            max_delay=self.max_delay,
            jitter=self.jitter,
            factor=self.factor,
        )

    def build_retry(self, **overrides: Any) -> Retry:
        """Build a :class:`Retry`; *overrides* win over the settings
        (``catch``, ``wait_hook``, ``fault_hook``, ...)."""
        kwargs: dict[str, Any] = {
            "max_attempts": self.max_attempts,
            "backoff": self.build_backoff(),
        }
        kwargs.update(overrides)
        return Retry(**kwargs)


__all__ = ["RetrySettings"]
