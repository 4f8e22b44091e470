"""Observability – LoggerFactory."""
from __future__ import annotations

from typing import TYPE_CHECKING, IO

from bk_logger.observability.logging.logger import DefaultLogger

if TYPE_CHECKING:
    from bk_logger.config.settings import LoggerSettings, SettingsLoader


class LoggerFactory:
    """Build a :class:`DefaultLogger` wired to structlog and Sentry."""

    @staticmethod
    def create(settings: LoggerSettings, stream: IO[str] | None = None) -> DefaultLogger:
        from bk_logger.adapters.sentry import SentryCrashReporter
        from bk_logger.adapters.structlog import StructlogSinkBuilder

        sink_builder = StructlogSinkBuilder(
            min_level=settings.min_level,
            json_output=settings.json_output,
            stream=stream,
        )
        reporter = SentryCrashReporter(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            release=settings.release,
            crashed_last_launch=settings.crashed_last_launch,
        )
        return DefaultLogger(sink_builder, reporter, destination=settings.log_destination)

    @staticmethod
    def from_env(loader: SettingsLoader | None = None) -> DefaultLogger:
        """Load :class:`LoggerSettings` (from the environment by default) and build."""
        from bk_logger.config.settings import EnvSettingsLoader, LoggerSettings

        settings = (loader or EnvSettingsLoader()).load(LoggerSettings)
        return LoggerFactory.create(settings)


__all__ = ["LoggerFactory"]
