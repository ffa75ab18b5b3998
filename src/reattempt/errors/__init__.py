"""Error hierarchy – public re-export surface.

Hierarchy::

    ReattemptError
    ├── ConfigError
    │   ├── MissingRequiredSettingError
    │   ├── SettingsSourceUnavailableError
    │   └── InvalidSettingValueError
    │       └── InvalidConfigurationError
    └── RetriesExceededError
"""

from reattempt.errors.base import ReattemptError
from reattempt.errors.config import (
    ConfigError,
    InvalidConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SettingsSourceUnavailableError,
)
from reattempt.errors.retry import RetriesExceededError

__all__ = [
    "ConfigError",
    "InvalidConfigurationError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ReattemptError",
    "RetriesExceededError",
    "SettingsSourceUnavailableError",
]
