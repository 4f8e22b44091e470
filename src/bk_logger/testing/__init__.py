"""Testing support – in-memory fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["bk_logger.testing.fixtures"]
"""

from bk_logger.testing.fakes import FakeCrashReporter, FakeLogSink, FakeSinkBuilder, SentEvent, SinkCall

__all__ = ["FakeCrashReporter", "FakeLogSink", "FakeSinkBuilder", "SentEvent", "SinkCall"]
