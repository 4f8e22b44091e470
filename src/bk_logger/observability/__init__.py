"""Observability – logging facade, log sinks, crash reporting."""

from bk_logger.observability.logging import (
    DefaultLogger,
    LogEvent,
    Logger,
    LoggerCategory,
    LoggerFactory,
    LoggerLevel,
)
from bk_logger.observability.sinks import LogSink, NoopLogSink, NoopSinkBuilder, SinkBuilder
from bk_logger.observability.telemetry import CrashReporter, NoopCrashReporter

__all__ = [
    "CrashReporter",
    "DefaultLogger",
    "LogEvent",
    "LogSink",
    "Logger",
    "LoggerCategory",
    "LoggerFactory",
    "LoggerLevel",
    "NoopCrashReporter",
    "NoopLogSink",
    "NoopSinkBuilder",
    "SinkBuilder",
]
