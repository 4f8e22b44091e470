"""Config settings – 12-factor env-based configuration."""
from bk_logger.config.settings.base import Settings
from bk_logger.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from bk_logger.config.settings.logger import LoggerSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "LoggerSettings", "Settings", "SettingsLoader"]
