"""Logging infrastructure for classgen.

Key components:
    get_logger: Factory function for creating package loggers
    setup_logging: Initialize logging configuration from YAML
    LoggingConfig: Configuration class for logging settings

Example:
    >>> from classgen.logging import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info("Generation started")
"""

from .logging_config import LoggingConfig, get_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "setup_logging",
    "get_logger",
]
