"""Application-layer errors."""

from __future__ import annotations

from bk_logger.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Misuse or misconfiguration of the library by its caller."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
