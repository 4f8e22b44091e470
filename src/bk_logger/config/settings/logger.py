"""Config settings – LoggerSettings."""
from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import ClassVar

from bk_logger.config.settings.base import Settings
from bk_logger.config.validation import InvalidSettingValueError
from bk_logger.observability.logging.levels import LoggerLevel


@dataclasses.dataclass
class LoggerSettings(Settings):
    """Settings for the default logger, read from ``BK_LOGGER_*`` variables."""

    _prefix: ClassVar[str] = "BK_LOGGER"

    sentry_dsn: str = ""
    environment: str = "production"
    release: str = ""
    log_level: str = "debug"
    log_file: str = ""
    json_output: bool = False
    crashed_last_launch: bool = False

    def _validate(self) -> None:
        names = {level.value for level in LoggerLevel}
        if self.log_level.lower() not in names:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(names)}"
            )

    @property
    def min_level(self) -> LoggerLevel:
        return LoggerLevel(self.log_level.lower())

    @property
    def log_destination(self) -> Path | None:
        return Path(self.log_file) if self.log_file else None


__all__ = ["LoggerSettings"]
