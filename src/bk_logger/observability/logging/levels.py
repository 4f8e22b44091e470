"""Observability – LoggerLevel and LoggerCategory."""
from __future__ import annotations

import logging
from enum import Enum


class LoggerLevel(str, Enum):
    """Severity of a log call, ordered by increasing severity.

    Only :attr:`FATAL` is forwarded to the crash reporter.
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    FATAL = "fatal"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def sink_method(self) -> str:
        """Name of the :class:`LogSink` method handling this level."""
        return "error" if self is LoggerLevel.FATAL else self.value

    @property
    def stdlib_level(self) -> int:
        return _STDLIB_LEVELS[self]

    @property
    def is_reportable(self) -> bool:
        return self is LoggerLevel.FATAL

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LoggerLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LoggerLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LoggerLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LoggerLevel):
            return NotImplemented
        return self.rank >= other.rank


_RANKS: dict[LoggerLevel, int] = {
    LoggerLevel.DEBUG: 0,
    LoggerLevel.INFO: 1,
    LoggerLevel.WARNING: 2,
    LoggerLevel.FATAL: 3,
}

_STDLIB_LEVELS: dict[LoggerLevel, int] = {
    LoggerLevel.DEBUG: logging.DEBUG,
    LoggerLevel.INFO: logging.INFO,
    LoggerLevel.WARNING: logging.WARNING,
    LoggerLevel.FATAL: logging.ERROR,
}


class LoggerCategory(str, Enum):
    """Subsystem a log call originates from. Forwarded as-is."""

    SETUP = "setup"
    STORAGE = "storage"
    SYNC = "sync"
    TABS = "tabs"
    LIBRARY = "library"
    LIFECYCLE = "lifecycle"
    WEBVIEW = "webview"
    REDUX = "redux"
    AUTOFILL = "autofill"
    REMOTE_SETTINGS = "remote_settings"
    HOMEPAGE = "homepage"
    CERTIFICATE = "certificate"
    EXPERIMENTS = "experiments"
    COORDINATOR = "coordinator"
    TESTS = "tests"


__all__ = ["LoggerCategory", "LoggerLevel"]
