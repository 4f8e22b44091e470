"""Observability – LogSink and SinkBuilder ports."""
from __future__ import annotations

import abc
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Union

MessageSource = Union[Callable[[], Any], Any]


def resolve_message(message: MessageSource) -> str:
    """Evaluate a deferred message (once) and return it as text."""
    value = message() if callable(message) else message
    return f"{value}"


class LogSink(abc.ABC):
    """Backend that writes log lines, one method per severity tier.

    *message* may be a zero-argument callable; implementations evaluate it at
    most once. *file*, *function* and *line* are supplied by the caller.
    """

    destination: Path | None = None

    @abc.abstractmethod
    def debug(
        self,
        message: MessageSource,
        file: str | None,
        function: str | None,
        line: int | None,
        context: Mapping[str, Any] | None = None,
    ) -> None: ...

    @abc.abstractmethod
    def info(
        self,
        message: MessageSource,
        file: str | None,
        function: str | None,
        line: int | None,
        context: Mapping[str, Any] | None = None,
    ) -> None: ...

    @abc.abstractmethod
    def warning(
        self,
        message: MessageSource,
        file: str | None,
        function: str | None,
        line: int | None,
        context: Mapping[str, Any] | None = None,
    ) -> None: ...

    @abc.abstractmethod
    def error(
        self,
        message: MessageSource,
        file: str | None,
        function: str | None,
        line: int | None,
        context: Mapping[str, Any] | None = None,
    ) -> None: ...


class SinkBuilder(abc.ABC):
    """Port: create a :class:`LogSink`, optionally writing to *destination*."""

    @abc.abstractmethod
    def setup(self, destination: Path | None = None) -> LogSink: ...


__all__ = ["LogSink", "MessageSource", "SinkBuilder", "resolve_message"]
