"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        ├── LogDestinationError
        └── ExternalServiceError
"""

from bk_logger.kernel.errors.application import ApplicationError
from bk_logger.kernel.errors.base import BaseError
from bk_logger.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    LogDestinationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ExternalServiceError",
    "InfrastructureError",
    "LogDestinationError",
]
