"""
bk_logger – logging facade over a structured log sink and a crash reporter.

Import path convention::

    from bk_logger.observability.logging import DefaultLogger, LoggerCategory, LoggerLevel
    from bk_logger.observability.logging import LoggerFactory
    from bk_logger.config.settings import LoggerSettings
    from bk_logger.testing.fakes import FakeCrashReporter, FakeLogSink
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
