"""Testing fakes – in-memory doubles for the sink and crash reporter ports."""
from bk_logger.testing.fakes.sink import FakeLogSink, FakeSinkBuilder, SinkCall
from bk_logger.testing.fakes.telemetry import FakeCrashReporter, SentEvent

__all__ = ["FakeCrashReporter", "FakeLogSink", "FakeSinkBuilder", "SentEvent", "SinkCall"]
