"""
Error handling framework for fuzzinfer.

This module provides the exception hierarchy and the error code registry
used throughout the package.
"""

from fuzzinfer.errors.error_codes import ErrorCodes
from fuzzinfer.errors.exceptions import (
    ConfigurationError,
    ConfigurationFileError,
    FuzzinferError,
    InvalidConfigurationError,
    ProcessingError,
    ValidationError,
)

__all__ = [
    # Base exception
    "FuzzinferError",
    # Exception hierarchy
    "ValidationError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationFileError",
    "ProcessingError",
    # Error codes
    "ErrorCodes",
]
