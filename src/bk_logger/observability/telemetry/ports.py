"""Observability – CrashReporter port."""
from __future__ import annotations

import abc
from collections.abc import Mapping

from bk_logger.observability.logging.levels import LoggerCategory, LoggerLevel


class CrashReporter(abc.ABC):
    """Port: crash/error reporting backend with a usage-data opt-in."""

    @property
    @abc.abstractmethod
    def crashed_last_launch(self) -> bool:
        """Whether the previous session ended in a crash (set externally)."""

    @abc.abstractmethod
    def setup(self, send_usage_data: bool) -> None:
        """Record the user's usage-data opt-in choice."""

    @abc.abstractmethod
    def send(
        self,
        message: str,
        category: LoggerCategory,
        level: LoggerLevel,
        extra_events: Mapping[str, str] | None,
    ) -> None:
        """Report one event."""


__all__ = ["CrashReporter"]
