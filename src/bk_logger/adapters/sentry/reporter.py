"""Sentry adapter – SentryCrashReporter."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import sentry_sdk
import structlog
from sentry_sdk.utils import BadDsn

from bk_logger.kernel.errors import ExternalServiceError
from bk_logger.observability.logging.levels import LoggerCategory, LoggerLevel
from bk_logger.observability.telemetry.ports import CrashReporter

_SENTRY_LEVELS: dict[LoggerLevel, str] = {
    LoggerLevel.DEBUG: "debug",
    LoggerLevel.INFO: "info",
    LoggerLevel.WARNING: "warning",
    LoggerLevel.FATAL: "fatal",
}

_log = structlog.get_logger(__name__)


class SentryCrashReporter(CrashReporter):
    """Crash reporter backed by ``sentry-sdk``.

    The SDK is only initialised once the user opts in through
    :meth:`setup`; until then :meth:`send` drops events.

    Parameters
    ----------
    dsn:
        Sentry DSN. Empty keeps the reporter disabled even after opt-in.
    environment:
        Sentry ``environment`` tag.
    release:
        Sentry ``release``; empty means unset.
    crashed_last_launch:
        Crash state of the previous session, as determined by the host app.
    """

    def __init__(
        self,
        dsn: str = "",
        environment: str = "production",
        release: str = "",
        crashed_last_launch: bool = False,
    ) -> None:
        self._dsn = dsn
        self._environment = environment
        self._release = release
        self._crashed_last_launch = crashed_last_launch
        self._enabled = False

    @property
    def crashed_last_launch(self) -> bool:
        return self._crashed_last_launch

    @property
    def enabled(self) -> bool:
        return self._enabled

    def setup(self, send_usage_data: bool) -> None:
        if not send_usage_data:
            _log.info("crash_reporter.disabled", reason="usage_data_opt_out")
            return
        if not self._dsn:
            _log.info("crash_reporter.disabled", reason="missing_dsn")
            return
        if self._enabled:
            return
        try:
            sentry_sdk.init(
                dsn=self._dsn,
                environment=self._environment,
                release=self._release or None,
                send_default_pii=False,
            )
        except BadDsn as exc:
            raise ExternalServiceError("sentry", f"Invalid Sentry DSN: {exc}", cause=exc) from exc
        self._enabled = True
        _log.info("crash_reporter.enabled", environment=self._environment)

    def send(
        self,
        message: str,
        category: LoggerCategory,
        level: LoggerLevel,
        extra_events: Mapping[str, str] | None,
    ) -> None:
        if not self._enabled:
            return
        sentry_sdk.capture_event(self._make_event(message, category, level, extra_events))

    @staticmethod
    def _make_event(
        message: str,
        category: LoggerCategory,
        level: LoggerLevel,
        extra_events: Mapping[str, str] | None,
    ) -> dict[str, Any]:
        event: dict[str, Any] = {
            "message": message,
            "level": _SENTRY_LEVELS[level],
            "tags": {"category": category.value},
        }
        if extra_events:
            event["extra"] = dict(extra_events)
        return event


__all__ = ["SentryCrashReporter"]
