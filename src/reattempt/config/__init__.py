"""Config settings – 12-factor env-based configuration."""
from reattempt.config.base import Settings
from reattempt.config.factory import SettingsFactory
from reattempt.config.loaders import EnvSettingsLoader, SettingsLoader
from reattempt.config.retry import RetrySettings

__all__ = ["EnvSettingsLoader", "RetrySettings", "Settings", "SettingsFactory", "SettingsLoader"]
