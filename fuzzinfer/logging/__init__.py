"""
Logging system for fuzzinfer.

This module provides the package logging configuration with console and
rotating file outputs, and helper decorators for common logging patterns.
"""

from fuzzinfer.logging.config import (
    configure_logging,
    get_logger,
    is_debug_mode,
    set_debug_mode,
)
from fuzzinfer.logging.helpers import log_data_operation, log_performance

__all__ = [
    # Configuration
    "configure_logging",
    "get_logger",
    "set_debug_mode",
    "is_debug_mode",
    # Helper methods
    "log_performance",
    "log_data_operation",
]
