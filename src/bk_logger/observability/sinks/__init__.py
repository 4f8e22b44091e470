"""Observability – log sink ports and no-op implementations."""
from bk_logger.observability.sinks.ports import LogSink, MessageSource, SinkBuilder, resolve_message
from bk_logger.observability.sinks.noop import NoopLogSink, NoopSinkBuilder

__all__ = ["LogSink", "MessageSource", "NoopLogSink", "NoopSinkBuilder", "SinkBuilder", "resolve_message"]
