"""Shared fixtures for the bk-logger test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from bk_logger.testing.fixtures import (  # noqa: F401
    fake_crash_reporter,
    fake_sink,
    fake_sink_builder,
    logger,
)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Undo structlog configuration and sink handlers installed by a test."""
    yield
    structlog.reset_defaults()
    for name in list(logging.Logger.manager.loggerDict):
        if not name.startswith("bk_logger"):
            continue
        target = logging.getLogger(name)
        for handler in list(target.handlers):
            target.removeHandler(handler)
            handler.close()
