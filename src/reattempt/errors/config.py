"""Configuration errors – raised while building backoff and retry objects."""
from __future__ import annotations

from reattempt.errors.base import ReattemptError


class ConfigError(ReattemptError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's raw value could not be coerced into its declared type."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class InvalidConfigurationError(InvalidSettingValueError):
    """A backoff or retry parameter is outside its documented range."""
    default_code = "invalid_configuration"


class SettingsSourceUnavailableError(ConfigError):
    """A settings loader could not reach its source at all."""
    default_code = "settings_source_unavailable"


__all__ = [
    "ConfigError",
    "InvalidConfigurationError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingsSourceUnavailableError",
]
