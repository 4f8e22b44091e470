"""Sentry adapter – crash reporter."""
from bk_logger.adapters.sentry.reporter import SentryCrashReporter

__all__ = ["SentryCrashReporter"]
