"""
Logging Configuration Module.

This module provides centralized logging configuration for the konga package.
Defaults come from ``konga.core.config.settings.logging`` and are only looked up
when ``setup_logging`` runs, so importing a module that logs never reads the
environment. Every value can be overridden per call.

Features:
- Configurable log levels per module
- Console and optional file logging
- Simple, detailed and JSON-shaped line formats
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from konga.core.config import LoggingConfig

LOG_FILE_NAME = "konga.log"

# Define log formats
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

FORMATS = {
    "simple": SIMPLE_FORMAT,
    "detailed": DETAILED_FORMAT,
    "json": JSON_FORMAT,
}

# Module-specific log levels
MODULE_LOG_LEVELS = {
    "konga": "INFO",
    "konga.seeds": "DEBUG",
    "konga.core": "INFO",
    # Third-party libraries (reduce noise)
    "pydantic": "WARNING",
}


def _get_logging_config() -> "LoggingConfig":
    """Get logging configuration from the settings model.

    Settings are imported here rather than at module level so that importing
    ``konga.seeds`` stays independent of the environment.
    """
    from konga.core.config import settings

    return settings.logging


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: Optional[bool] = None,
) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Override default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override default format (simple, detailed, json). Unknown names fall back to detailed.
        enable_file: Whether to enable file logging. Defaults to the configured value.

    Raises:
        ValueError: If the log level is not a known level name. Existing handlers are left in place.
    """
    config = _get_logging_config()
    level = (log_level or config.level).upper()
    fmt = log_format or config.format
    write_file = config.enable_file if enable_file is None else enable_file

    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {level!r}")

    formatter = logging.Formatter(FORMATS.get(fmt, DETAILED_FORMAT), datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all levels, filter at handler level

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if write_file:
        log_dir = Path(config.file_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME)
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.debug(f"Logging configured: level={level}, format={fmt}, file_logging={write_file}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)
