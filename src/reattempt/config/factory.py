"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, Sequence, TypeVar

from reattempt.config.base import Settings
from reattempt.config.loaders import SettingsLoader
from reattempt.errors import ConfigError, MissingRequiredSettingError, SettingsSourceUnavailableError

T = TypeVar("T", bound=Settings)
logger = logging.getLogger(__name__)


class SettingsFactory:
    """Merge outputs from multiple loaders, apply overrides, and construct
    a settings dataclass in one step.

    Loaders are applied in order; later loaders override earlier ones for
    overlapping fields.  *overrides* (if provided) take the highest priority.
    A loader raising :class:`SettingsSourceUnavailableError` or
    :class:`MissingRequiredSettingError` is skipped with a warning and the
    merged result is checked for required fields afterwards.  Uncoercible or
    out-of-range values propagate.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Raises
        ------
        MissingRequiredSettingError
            When a required field (no default) is absent after all sources
            have been merged.
        InvalidSettingValueError
            When a loader finds a value it cannot coerce.
        InvalidConfigurationError
            When the merged values are out of range.
        """
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                instance = loader.load(settings_cls)
            except (SettingsSourceUnavailableError, MissingRequiredSettingError) as exc:
                logger.warning("settings loader %s skipped: %s", type(loader).__name__, exc.message)
                continue
            for field in dataclasses.fields(instance):  # type: ignore[arg-type]
                merged[field.name] = getattr(instance, field.name)

        if overrides:
            merged.update(overrides)

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            if field.name in merged:
                continue
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING
            ):
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}", cause=exc) from exc


__all__ = ["SettingsFactory"]
