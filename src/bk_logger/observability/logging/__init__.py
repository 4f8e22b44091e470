"""Observability – logging facade: levels, categories, events, DefaultLogger."""
from bk_logger.observability.logging.levels import LoggerCategory, LoggerLevel
from bk_logger.observability.logging.protocol import ERROR_DESCRIPTION_KEY, LogEvent, Logger
from bk_logger.observability.logging.logger import DefaultLogger
from bk_logger.observability.logging.factory import LoggerFactory

__all__ = [
    "DefaultLogger",
    "ERROR_DESCRIPTION_KEY",
    "LogEvent",
    "Logger",
    "LoggerCategory",
    "LoggerFactory",
    "LoggerLevel",
]
