"""
Exception hierarchy for fuzzinfer.

The computational core is designed to return values rather than raise for
every outcome it defines (no matches, zero weight, zero membership mass,
empty domain). Exceptions are reserved for invalid construction, invalid
configuration and scan parameters that would never terminate.
"""

from typing import Any, Optional


class FuzzinferError(Exception):
    """
    Base exception class for all fuzzinfer errors.

    Attributes:
        message: Human-readable error message
        error_code: Optional error code for reference and documentation
        details: Optional dictionary with additional error details
        suggestion: Optional suggestion text for how to fix the error
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Initialize a new FuzzinferError.

        Args:
            message: Human-readable error message
            error_code: Optional error code for reference and documentation
            details: Optional dictionary with additional error details
            suggestion: Optional suggestion text for how to fix the error
        """
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestion = suggestion
        super().__init__(message)


# --- Validation Errors ---


class ValidationError(FuzzinferError):
    """
    Exception raised when a call parameter is unusable.

    Use for caller-supplied arguments, NOT for configuration file issues.

    Examples:
        Non-positive scan step:
            >>> raise ValidationError(
            ...     message="Scan step must be a finite number greater than 0",
            ...     error_code="SCAN-InvalidStep",
            ...     details={"step": 0.0}
            ... )

    See Also:
        - ConfigurationError: For configuration and construction issues
    """

    pass


# --- Configuration Errors ---


class ConfigurationError(FuzzinferError):
    """
    Configuration error with structured error reporting.

    Use for invalid membership function parameters, invalid rule
    construction and configuration files. The fix typically requires
    **editing a definition** rather than changing call arguments.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        context: Dictionary with error location (file, section, field)
        details: Dictionary with structured error data
        suggestion: How to fix the error

    Examples:
        >>> raise ConfigurationError(
        ...     message="Unknown membership function type: sigmoid",
        ...     error_code="MF-UnknownType",
        ...     details={"type": "sigmoid"},
        ...     suggestion="Use one of: triangular, trapezoidal, gaussian"
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[dict[str, Any]] = None,
        details: Optional[dict[str, Any]] = None,
        suggestion: str = "",
    ) -> None:
        """
        Initialize a configuration error.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            context: Where error occurred (file, section, field)
            details: Structured data about the error
            suggestion: How to fix the error
        """
        super().__init__(message, error_code, details)
        self.context = context or {}
        self.suggestion = suggestion

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize error to a dictionary.

        Returns:
            Dictionary with all error information
        """
        return {
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "details": self.details,
            "suggestion": self.suggestion,
        }

    def format_user_message(self) -> str:
        """
        Format a user-friendly error message with all context.

        Returns:
            Formatted error message string
        """
        parts = [f"Error: {self.message}"]

        if self.error_code:
            parts.append(f"Code: {self.error_code}")

        if self.context:
            context_parts = []
            if "file" in self.context:
                context_parts.append(f"File: {self.context['file']}")
            if "section" in self.context:
                context_parts.append(f"Section: {self.context['section']}")
            if context_parts:
                parts.append("Location: " + ", ".join(context_parts))

        if self.suggestion:
            parts.append(f"\nSuggestion: {self.suggestion}")

        return "\n".join(parts)

    def __str__(self) -> str:
        """String representation of the error."""
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class InvalidConfigurationError(ConfigurationError):
    """Exception raised when configuration content is invalid."""

    pass


class ConfigurationFileError(ConfigurationError):
    """Exception raised when a configuration file cannot be found or read."""

    pass


# --- Processing Errors ---


class ProcessingError(FuzzinferError):
    """
    Base class for errors raised while running inference.

    Covers requests the engine cannot serve, such as an unknown
    defuzzification method or an unsupported batch input type.
    """

    pass
