"""structlog adapter – StructlogSink and StructlogSinkBuilder."""
from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import IO, Any

import structlog

from bk_logger.kernel.errors import LogDestinationError
from bk_logger.observability.logging.levels import LoggerLevel
from bk_logger.observability.sinks.ports import LogSink, MessageSource, SinkBuilder, resolve_message

DEFAULT_LOGGER_NAME = "bk_logger"

_STDLIB_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class StructlogSink(LogSink):
    """Emit each log call as one structlog event.

    The rendered message is the event; source location and the context keys
    become event fields. When *stdlib_logger* is given, calls below its
    effective level return before the message is evaluated.
    """

    def __init__(
        self,
        logger: Any,
        destination: Path | None = None,
        stdlib_logger: logging.Logger | None = None,
    ) -> None:
        self._log = logger
        self._stdlib_logger = stdlib_logger
        self.destination = destination

    def debug(self, message: MessageSource, file: str | None, function: str | None, line: int | None, context: Mapping[str, Any] | None = None) -> None:
        self._emit("debug", message, file, function, line, context)

    def info(self, message: MessageSource, file: str | None, function: str | None, line: int | None, context: Mapping[str, Any] | None = None) -> None:
        self._emit("info", message, file, function, line, context)

    def warning(self, message: MessageSource, file: str | None, function: str | None, line: int | None, context: Mapping[str, Any] | None = None) -> None:
        self._emit("warning", message, file, function, line, context)

    def error(self, message: MessageSource, file: str | None, function: str | None, line: int | None, context: Mapping[str, Any] | None = None) -> None:
        self._emit("error", message, file, function, line, context)

    def _emit(
        self,
        method_name: str,
        message: MessageSource,
        file: str | None,
        function: str | None,
        line: int | None,
        context: Mapping[str, Any] | None,
    ) -> None:
        if self._stdlib_logger is not None and not self._stdlib_logger.isEnabledFor(_STDLIB_LEVELS[method_name]):
            return
        fields: dict[str, Any] = {"file": file, "function": function, "line": line}
        if context:
            fields.update(context)
        getattr(self._log, method_name)(resolve_message(message), **fields)


class StructlogSinkBuilder(SinkBuilder):
    """Configure structlog on a dedicated stdlib logger and return a sink.

    Output goes to *stream* (stderr by default) and, when a destination is
    given, to that file as well. Rendering is JSON when *json_output* is set,
    otherwise structlog's console renderer.

    Parameters
    ----------
    min_level:
        Lowest :class:`LoggerLevel` written by the sink.
    json_output:
        Render JSON lines instead of human-readable console output.
    logger_name:
        Name of the stdlib logger the sink writes through.
    stream:
        Console stream. ``None`` means :data:`sys.stderr`.
    """

    def __init__(
        self,
        min_level: LoggerLevel = LoggerLevel.DEBUG,
        json_output: bool = False,
        logger_name: str = DEFAULT_LOGGER_NAME,
        stream: IO[str] | None = None,
    ) -> None:
        self._min_level = min_level
        self._json_output = json_output
        self._logger_name = logger_name
        self._stream = stream

    def setup(self, destination: Path | None = None) -> LogSink:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if self._json_output
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )

        handlers: list[logging.Handler] = [logging.StreamHandler(self._stream or sys.stderr)]
        if destination is not None:
            handlers.append(self._file_handler(destination))

        target = logging.getLogger(self._logger_name)
        for old in list(target.handlers):
            target.removeHandler(old)
            old.close()
        for handler in handlers:
            handler.setFormatter(formatter)
            target.addHandler(handler)
        target.setLevel(self._min_level.stdlib_level)
        target.propagate = False

        structlog.get_logger(__name__).debug(
            "log_sink.configured",
            destination=str(destination) if destination is not None else None,
            min_level=self._min_level.value,
            json_output=self._json_output,
        )
        return StructlogSink(structlog.get_logger(self._logger_name), destination, stdlib_logger=target)

    @staticmethod
    def _file_handler(destination: Path) -> logging.FileHandler:
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            return logging.FileHandler(destination, encoding="utf-8")
        except OSError as exc:
            raise LogDestinationError(destination, cause=exc) from exc


__all__ = ["DEFAULT_LOGGER_NAME", "StructlogSink", "StructlogSinkBuilder"]
