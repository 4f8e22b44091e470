"""Testing fakes – FakeLogSink and FakeSinkBuilder."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from bk_logger.observability.sinks.ports import LogSink, MessageSource, SinkBuilder, resolve_message

_METHODS = ("debug", "info", "warning", "error")


@dataclasses.dataclass(frozen=True)
class SinkCall:
    method: str
    message: str
    file: str | None
    function: str | None
    line: int | None
    context: Mapping[str, Any] | None


class FakeLogSink(LogSink):
    """In-memory :class:`LogSink` that records every call.

    Counters are per instance; create a fresh sink per test.

    Usage::

        sink = FakeLogSink()
        logger = DefaultLogger(FakeSinkBuilder(sink), FakeCrashReporter())
        logger.log("hi", LoggerLevel.INFO, LoggerCategory.SETUP)
        sink.assert_called("info", 1)
    """

    def __init__(self, destination: Path | None = None) -> None:
        self.destination = destination
        self.calls: list[SinkCall] = []

    def debug(self, message: MessageSource, file: str | None, function: str | None, line: int | None, context: Mapping[str, Any] | None = None) -> None:
        self._record("debug", message, file, function, line, context)

    def info(self, message: MessageSource, file: str | None, function: str | None, line: int | None, context: Mapping[str, Any] | None = None) -> None:
        self._record("info", message, file, function, line, context)

    def warning(self, message: MessageSource, file: str | None, function: str | None, line: int | None, context: Mapping[str, Any] | None = None) -> None:
        self._record("warning", message, file, function, line, context)

    def error(self, message: MessageSource, file: str | None, function: str | None, line: int | None, context: Mapping[str, Any] | None = None) -> None:
        self._record("error", message, file, function, line, context)

    def _record(
        self,
        method: str,
        message: MessageSource,
        file: str | None,
        function: str | None,
        line: int | None,
        context: Mapping[str, Any] | None,
    ) -> None:
        self.calls.append(SinkCall(method, resolve_message(message), file, function, line, context))

    # ------------------------------------------------------------------
    # Counters
    # ------------------------------------------------------------------

    def call_count(self, method: str) -> int:
        return sum(1 for call in self.calls if call.method == method)

    @property
    def debug_called(self) -> int:
        return self.call_count("debug")

    @property
    def info_called(self) -> int:
        return self.call_count("info")

    @property
    def warning_called(self) -> int:
        return self.call_count("warning")

    @property
    def error_called(self) -> int:
        return self.call_count("error")

    @property
    def saved_message(self) -> str | None:
        """Message of the most recent call, ``None`` before any call."""
        return self.calls[-1].message if self.calls else None

    # ------------------------------------------------------------------
    # Assertion helpers
    # ------------------------------------------------------------------

    def assert_called(self, method: str, n: int = 1) -> None:
        """Assert *method* was called exactly *n* times and no other method was."""
        assert method in _METHODS, f"Unknown sink method '{method}'"
        counts = {name: self.call_count(name) for name in _METHODS}
        assert counts[method] == n, (
            f"Sink '{method}' was called {counts[method]} time(s), expected {n}"
        )
        others = {name: c for name, c in counts.items() if name != method and c}
        assert not others, f"Unexpected sink calls: {others}"

    def reset(self) -> None:
        self.calls.clear()


class FakeSinkBuilder(SinkBuilder):
    """Return a given :class:`FakeLogSink` and record the requested destination."""

    def __init__(self, sink: FakeLogSink | None = None) -> None:
        self.sink = sink or FakeLogSink()
        self.destinations: list[Path | None] = []

    def setup(self, destination: Path | None = None) -> FakeLogSink:
        self.destinations.append(destination)
        self.sink.destination = destination
        return self.sink


__all__ = ["FakeLogSink", "FakeSinkBuilder", "SinkCall"]
