"""Observability – DefaultLogger.

Formats a log call once and routes it:

* always to the :class:`LogSink` method for the level (``fatal`` → ``error``);
* additionally to the :class:`CrashReporter` when the level is ``fatal``.
"""
from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from bk_logger.observability.logging.levels import LoggerCategory, LoggerLevel
from bk_logger.observability.logging.protocol import LogEvent
from bk_logger.observability.sinks.ports import LogSink, SinkBuilder
from bk_logger.observability.telemetry.ports import CrashReporter


class DefaultLogger:
    """Logging facade over a log sink and a crash reporter.

    Parameters
    ----------
    sink_builder:
        Builds the sink once, at construction.
    crash_reporter:
        Receives fatal events and the usage-data opt-in.
    destination:
        Optional file the sink should write to, passed to *sink_builder*.

    Example
    -------
    ::

        logger = DefaultLogger(StructlogSinkBuilder(), SentryCrashReporter(dsn))
        logger.setup(send_usage_data=True)
        logger.log("Profile loaded", LoggerLevel.INFO, LoggerCategory.SETUP)
    """

    def __init__(
        self,
        sink_builder: SinkBuilder,
        crash_reporter: CrashReporter,
        destination: Path | None = None,
    ) -> None:
        self._sink = sink_builder.setup(destination)
        self._crash_reporter = crash_reporter

    @property
    def sink(self) -> LogSink:
        return self._sink

    @property
    def crashed_last_launch(self) -> bool:
        return self._crash_reporter.crashed_last_launch

    def setup(self, send_usage_data: bool) -> None:
        """Forward the usage-data opt-in to the crash reporter."""
        self._crash_reporter.setup(send_usage_data)

    def log(
        self,
        message: str,
        level: LoggerLevel,
        category: LoggerCategory,
        extra: Mapping[str, str] | None = None,
        description: str | None = None,
        *,
        file: str | None = None,
        function: str | None = None,
        line: int | None = None,
    ) -> None:
        event = LogEvent(
            message=message,
            level=level,
            category=category,
            extra=dict(extra or {}),
            description=description,
            file=file,
            function=function,
            line=line,
        )
        self._log_to_sink(event)
        if event.level.is_reportable:
            self._crash_reporter.send(
                event.message,
                event.category,
                event.level,
                event.telemetry_extras(),
            )

    def _log_to_sink(self, event: LogEvent) -> None:
        method = getattr(self._sink, event.level.sink_method)
        method(
            event.formatted_message,
            event.file,
            event.function,
            event.line,
            event.sink_context(),
        )


__all__ = ["DefaultLogger"]
