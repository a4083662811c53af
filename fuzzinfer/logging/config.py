"""
Logging configuration for fuzzinfer.

This module handles the centralized logging configuration including:
- Console and file output handlers
- Log rotation with configurable parameters
- Global debug flag mechanism
- Logger retrieval with component-specific levels
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

# Global debug flag
_DEBUG_MODE = False

# Console level requested by the last configure_logging call
_CONSOLE_LEVEL = logging.INFO

# Component-specific log levels
_COMPONENT_LOG_LEVELS = {
    "fuzzinfer.core.sampling": logging.INFO,
    "fuzzinfer.config": logging.INFO,
}

# Default log format with detailed context
_DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s.%(funcName)s:%(lineno)d | %(message)s"

# Simplified format for console in normal mode
_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Color formatting for console output
_LOG_COLORS = {
    "DEBUG": "\033[94m",  # Blue
    "INFO": "\033[92m",  # Green
    "WARNING": "\033[93m",  # Yellow
    "ERROR": "\033[91m",  # Red
    "CRITICAL": "\033[91m\033[1m",  # Bold Red
    "RESET": "\033[0m",  # Reset
}


class ColorFormatter(logging.Formatter):
    """Formatter that adds colors to log levels for console output."""

    def format(self, record):
        levelname = record.levelname
        if levelname in _LOG_COLORS:
            # Color a copy so other handlers see the plain level name
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = (
                f"{_LOG_COLORS[levelname]}{levelname}{_LOG_COLORS['RESET']}"
            )
        return super().format(record)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name and apply component-specific levels.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        A configured logger instance
    """
    logger = logging.getLogger(name)

    # Apply component-specific log levels
    for component, level in _COMPONENT_LOG_LEVELS.items():
        if component in name:
            logger.setLevel(level)
            break

    return logger


def _console_handlers(package_logger: logging.Logger) -> list:
    return [
        handler
        for handler in package_logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.FileHandler)
    ]


def set_debug_mode(enabled: bool) -> None:
    """
    Set the global debug mode flag.

    Debug mode lowers the ``fuzzinfer`` logger and its console handlers to
    DEBUG; disabling it restores INFO and the configured console level.

    Args:
        enabled: True to enable debug mode, False to disable
    """
    global _DEBUG_MODE
    old_value = _DEBUG_MODE
    _DEBUG_MODE = enabled

    package_logger = logging.getLogger("fuzzinfer")
    package_logger.setLevel(logging.DEBUG if enabled else logging.INFO)
    for handler in _console_handlers(package_logger):
        handler.setLevel(logging.DEBUG if enabled else _CONSOLE_LEVEL)

    # Only log if there's a change to avoid spam during initialization
    if old_value != _DEBUG_MODE:
        package_logger.info("Debug mode enabled" if enabled else "Debug mode disabled")


def is_debug_mode() -> bool:
    """
    Check if debug mode is currently enabled.

    Returns:
        True if debug mode is enabled, False otherwise
    """
    return _DEBUG_MODE


def configure_logging(
    log_dir: Optional[Union[str, Path]] = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_file_size_mb: int = 10,
    backup_count: int = 5,
    config: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Configure the package logging with console and optional file outputs.

    Handlers are attached to the ``fuzzinfer`` logger rather than the root
    logger so that importing the package leaves the host application's
    logging untouched.

    Args:
        log_dir: Directory to store log files; file logging is disabled when None
        console_level: Logging level for console output
        file_level: Logging level for file output
        max_file_size_mb: Maximum size of each log file in MB before rotation
        backup_count: Number of backup log files to keep
        config: Additional configuration options (console_format, file_format, debug_mode)
    """
    global _CONSOLE_LEVEL
    if config is None:
        config = {}
    _CONSOLE_LEVEL = console_level

    package_logger = logging.getLogger("fuzzinfer")
    level = logging.DEBUG if is_debug_mode() else logging.INFO
    package_logger.setLevel(level)

    # Clear any existing handlers to avoid duplicates if reconfigured
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    # Console Handler (with color)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_format = config.get("console_format", _CONSOLE_FORMAT)
    console_handler.setFormatter(ColorFormatter(console_format))
    package_logger.addHandler(console_handler)

    # File Handler (if log directory is provided)
    if log_dir:
        log_path = Path(log_dir) if isinstance(log_dir, str) else log_dir
        log_path.mkdir(exist_ok=True, parents=True)
        log_file = log_path / "fuzzinfer.log"

        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file,
            maxBytes=max_file_size_mb * 1024 * 1024,  # Convert MB to bytes
            backupCount=backup_count,
        )
        file_handler.setLevel(file_level)
        file_format = config.get("file_format", _DEFAULT_FORMAT)
        file_handler.setFormatter(logging.Formatter(file_format))
        package_logger.addHandler(file_handler)

    if log_dir:
        package_logger.debug(
            f"fuzzinfer logging initialized (console: {logging.getLevelName(console_level)}, files: {log_dir})"
        )
    else:
        package_logger.debug(
            f"fuzzinfer logging initialized (console only: {logging.getLevelName(console_level)})"
        )

    # Set debug mode based on configuration
    debug_mode = config.get("debug_mode", is_debug_mode())
    set_debug_mode(debug_mode)
