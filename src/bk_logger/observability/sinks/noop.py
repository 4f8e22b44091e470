"""Observability – NoopLogSink and NoopSinkBuilder."""
from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from bk_logger.observability.sinks.ports import LogSink, MessageSource, SinkBuilder


class NoopLogSink(LogSink):
    """Silent sink. Deferred messages are never evaluated."""

    def debug(self, message: MessageSource, file: str | None, function: str | None, line: int | None, context: Mapping[str, Any] | None = None) -> None:
        pass

    def info(self, message: MessageSource, file: str | None, function: str | None, line: int | None, context: Mapping[str, Any] | None = None) -> None:
        pass

    def warning(self, message: MessageSource, file: str | None, function: str | None, line: int | None, context: Mapping[str, Any] | None = None) -> None:
        pass

    def error(self, message: MessageSource, file: str | None, function: str | None, line: int | None, context: Mapping[str, Any] | None = None) -> None:
        pass


class NoopSinkBuilder(SinkBuilder):
    def setup(self, destination: Path | None = None) -> LogSink:  # noqa: ARG002
        return NoopLogSink()


__all__ = ["NoopLogSink", "NoopSinkBuilder"]
