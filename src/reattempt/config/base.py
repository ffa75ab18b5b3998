"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Each field maps to one external key, ``<PREFIX>_<FIELD>`` upper-cased
    (just ``<FIELD>`` when ``_prefix`` is empty).
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """External key for *field_name*, e.g. ``REATTEMPT_MAX_ATTEMPTS``."""
        if not cls._prefix:
            return field_name.upper()
        return f"{cls._prefix}_{field_name}".upper()


__all__ = ["Settings"]
