"""structlog adapter – console/file log sink."""
from bk_logger.adapters.structlog.sink import DEFAULT_LOGGER_NAME, StructlogSink, StructlogSinkBuilder

__all__ = ["DEFAULT_LOGGER_NAME", "StructlogSink", "StructlogSinkBuilder"]
