"""Config – 12-factor settings and validation errors."""
from bk_logger.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    LoggerSettings,
    Settings,
    SettingsLoader,
)
from bk_logger.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggerSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
