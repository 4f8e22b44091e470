"""Testing fixtures – register with ``pytest_plugins = ["bk_logger.testing.fixtures"]``."""
from bk_logger.testing.fixtures.logger import fake_crash_reporter, fake_sink, fake_sink_builder, logger

__all__ = ["fake_crash_reporter", "fake_sink", "fake_sink_builder", "logger"]
