"""Infrastructure errors — log destinations and crash reporting services."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from bk_logger.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Backend / I/O failure raised by a sink or telemetry adapter."""

    default_code = "infrastructure_error"


class LogDestinationError(InfrastructureError):
    """A log sink could not open its file destination."""

    default_code = "log_destination_error"

    def __init__(
        self,
        destination: Path | str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not open log destination '{destination}'", **kwargs)
        self.destination = str(destination)


class ExternalServiceError(InfrastructureError):
    """An external service (e.g. the crash reporter) rejected a request."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service


__all__ = [
    "ExternalServiceError",
    "InfrastructureError",
    "LogDestinationError",
]
