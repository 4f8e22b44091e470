"""Observability – NoopCrashReporter."""
from __future__ import annotations

from collections.abc import Mapping

from bk_logger.observability.logging.levels import LoggerCategory, LoggerLevel
from bk_logger.observability.telemetry.ports import CrashReporter


class NoopCrashReporter(CrashReporter):
    """Keeps the opt-in flag, drops every event."""

    def __init__(self, crashed_last_launch: bool = False) -> None:
        self._crashed_last_launch = crashed_last_launch
        self.send_usage_data: bool | None = None

    @property
    def crashed_last_launch(self) -> bool:
        return self._crashed_last_launch

    def setup(self, send_usage_data: bool) -> None:
        self.send_usage_data = send_usage_data

    def send(self, message: str, category: LoggerCategory, level: LoggerLevel, extra_events: Mapping[str, str] | None) -> None:
        pass


__all__ = ["NoopCrashReporter"]
