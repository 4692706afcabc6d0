"""Logging setup for classgen.

Logging is configured through ``logging.config.dictConfig``. The dictionary
comes from a YAML file when one is given (explicitly or through
CLASSGEN_LOGGING_CONFIG) and from the built-in defaults otherwise. The
defaults send ``classgen.*`` records to stderr so generated-file messages
never mix with the CLI's stdout report.

Usage:
    >>> from classgen.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Writing Foo to out/Foo.php")

Environment variables:
    CLASSGEN_LOGGING_CONFIG: Path to a YAML file in dictConfig format
    CLASSGEN_LOG_LEVEL: Level of the ``classgen`` logger in the defaults
"""

import logging
import logging.config
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_PATH_ENV = "CLASSGEN_LOGGING_CONFIG"
LOG_LEVEL_ENV = "CLASSGEN_LOG_LEVEL"

# Loggers whose level follows an explicit level override
DEFAULT_LOG_LEVELS = {
    "classgen": "INFO",
    "classgen.macros": "INFO",
    "classgen.generator": "INFO",
}


class LoggingConfig:
    """Resolves and applies the logging dictionary.

    Configuration precedence:
        1. Explicit config_path parameter
        2. CLASSGEN_LOGGING_CONFIG environment variable
        3. Built-in defaults (also used when the file does not exist)

    Example:
        >>> LoggingConfig().apply()
        >>> LoggingConfig(Path("logging.yml")).apply()
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or self._path_from_env()
        self._config: Optional[Dict[str, Any]] = None

    @staticmethod
    def _path_from_env() -> Optional[Path]:
        value = os.environ.get(CONFIG_PATH_ENV)
        return Path(value) if value else None

    def load_config(self) -> Dict[str, Any]:
        """Return the dictConfig dictionary, reading it on first use."""
        if self._config is None:
            if self.config_path is not None and self.config_path.exists():
                self._config = self._read_yaml(self.config_path)
            else:
                self._config = self.default_config()
        return self._config

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with path.open(encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def default_config() -> Dict[str, Any]:
        """Console logging for the ``classgen`` logger tree.

        Lines look like ``12:00:01.042 | INFO    | classgen.generator - message``.
        """
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s - %(message)s",
                    "datefmt": "%H:%M:%S",
                },
                "detailed": {
                    "format": "%(asctime)s | %(levelname)-7s | %(name)s | %(funcName)s:%(lineno)d - %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "classgen": {
                    "level": os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVELS["classgen"]),
                    "handlers": ["console"],
                    "propagate": True,
                },
            },
            "root": {"level": "WARNING"},
        }

    def apply(self) -> None:
        """Install the configuration. Calling it again reconfigures logging."""
        logging.config.dictConfig(self.load_config())


# Set by setup_logging; get_logger configures lazily while it is None
_logging_config: Optional[LoggingConfig] = None


def setup_logging(config_path: Optional[Path] = None, level: Optional[str] = None) -> None:
    """Configure logging for classgen.

    Args:
        config_path: YAML file in dictConfig format. Falls back to the
            environment, then to the defaults.
        level: Level forced on every logger in DEFAULT_LOG_LEVELS, overriding
            both the file and CLASSGEN_LOG_LEVEL.
    """
    global _logging_config

    _logging_config = LoggingConfig(config_path)
    _logging_config.apply()

    if level:
        for name in DEFAULT_LOG_LEVELS:
            logging.getLogger(name).setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    """Standard library logger, configuring logging on the first call."""
    if _logging_config is None:
        setup_logging()
    return logging.getLogger(name)
