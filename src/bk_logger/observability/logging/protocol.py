"""Observability – Logger protocol and LogEvent."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from bk_logger.observability.logging.levels import LoggerCategory, LoggerLevel

ERROR_DESCRIPTION_KEY = "errorDescription"


@dataclasses.dataclass(frozen=True)
class LogEvent:
    """A single log call, built at the call site and discarded after dispatch."""
    message: str
    level: LoggerLevel
    category: LoggerCategory
    extra: Mapping[str, str] = dataclasses.field(default_factory=dict)
    description: str | None = None
    file: str | None = None
    function: str | None = None
    line: int | None = None

    def formatted_message(self) -> str:
        """Return ``message[ - description][, key: value...]``.

        Extra pairs keep the mapping's insertion order.
        """
        parts = [self.message]
        if self.description is not None:
            parts.append(f" - {self.description}")
        for key, value in self.extra.items():
            parts.append(f", {key}: {value}")
        return "".join(parts)

    def telemetry_extras(self) -> dict[str, str]:
        """Return a copy of *extra* plus the description under ``errorDescription``."""
        extras = dict(self.extra)
        if self.description is not None:
            extras[ERROR_DESCRIPTION_KEY] = self.description
        return extras

    def sink_context(self) -> dict[str, object]:
        return {"category": self.category.value, "extra": dict(self.extra)}


@runtime_checkable
class Logger(Protocol):
    """Public logging facade."""

    @property
    def crashed_last_launch(self) -> bool: ...

    def setup(self, send_usage_data: bool) -> None: ...

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
    ) -> None: ...


__all__ = ["ERROR_DESCRIPTION_KEY", "LogEvent", "Logger"]
