"""Observability – crash reporter port and no-op implementation."""
from bk_logger.observability.telemetry.ports import CrashReporter
from bk_logger.observability.telemetry.noop import NoopCrashReporter

__all__ = ["CrashReporter", "NoopCrashReporter"]
