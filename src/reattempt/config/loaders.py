"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from typing import Any, Mapping, TypeVar

from reattempt.config.base import Settings
from reattempt.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source.

    Implementations raise :class:`~reattempt.errors.SettingsSourceUnavailableError`
    when the source itself cannot be read.
    """

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from environment variables.

    Field annotations are resolved with :func:`typing.get_type_hints`, so
    modules using ``from __future__ import annotations`` coerce the same way
    as those that do not.  Supported types: ``bool``, ``int``, ``float``,
    ``str`` and ``list[...]`` of those (comma separated).

    *environ* defaults to :data:`os.environ`; pass a mapping in tests.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        hints = typing.get_type_hints(settings_class)
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = settings_class.env_key(field.name)
            raw = environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            try:
                kwargs[field.name] = _coerce(raw, hints.get(field.name, str))
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc


def _coerce(value: str, type_hint: Any) -> Any:
    if typing.get_origin(type_hint) is list:
        (item_type,) = typing.get_args(type_hint) or (str,)
        return [_coerce(item.strip(), item_type) for item in value.split(",") if item.strip()]
    if type_hint is bool:
        flag = value.strip().lower()
        if flag in _TRUE:
            return True
        if flag in _FALSE:
            return False
        raise ValueError(f"not a boolean: {value!r}")
    if type_hint is int:
        return int(value)
    if type_hint is float:
        return float(value)
    return value


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
