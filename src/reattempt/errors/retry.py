"""Retry errors."""
from __future__ import annotations

from typing import Any

from reattempt.errors.base import ReattemptError


class RetriesExceededError(ReattemptError):
    """Raised when every configured attempt failed with a retryable fault.

    Attributes
    ----------
    attempts:
        How many times the operation was invoked.
    cause:
        The fault raised by the final attempt, or ``None`` when the retry was
        configured with zero attempts and the operation never ran.
    """

    default_code = "retries_exceeded"

    def __init__(
        self,
        attempts: int,
        *,
        cause: BaseException | None = None,
        message: str | None = None,
    ) -> None:
        if message is None:
            message = f"Operation failed after {attempts} attempt(s)"
            if cause is None and attempts == 0:
                message = "No attempts allowed"
        super().__init__(message, cause=cause)
        self.attempts = attempts

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["attempts"] = self.attempts
        return base


__all__ = ["RetriesExceededError"]
