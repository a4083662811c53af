"""
Helper decorators for common logging patterns.

This module provides decorators for performance tracking and data
operation logging.
"""

import functools
import logging
import time
from typing import Any, Callable, Optional, TypeVar, cast

from fuzzinfer.logging.config import get_logger

# Type variables for function decorators
F = TypeVar("F", bound=Callable[..., Any])


def log_performance(
    logger: Optional[logging.Logger] = None,
    threshold_ms: float = 0,  # 0 means log all calls
    log_level: int = logging.DEBUG,
) -> Callable[[F], F]:
    """
    Decorator to log function performance.

    Args:
        logger: Logger to use (if None, get logger based on module name)
        threshold_ms: Only log if execution time exceeds threshold (milliseconds)
        log_level: Log level for performance messages

    Returns:
        Decorated function with performance logging
    """

    def decorator(func: F) -> F:
        # Use provided logger or get one based on module name
        log = logger or get_logger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            start_time = time.perf_counter()
            result = func(*args, **kwargs)
            elapsed_ms = (time.perf_counter() - start_time) * 1000

            if elapsed_ms >= threshold_ms:
                log.log(
                    log_level,
                    f"Performance: {func.__qualname__} took {elapsed_ms:.2f}ms",
                )

            return result

        return cast(F, wrapper)

    return decorator


def log_data_operation(
    operation: str,
    data_type: str,
    logger: Optional[logging.Logger] = None,
    log_level: int = logging.INFO,
) -> Callable[[F], F]:
    """
    Decorator to log data operations with consistent formatting.

    Args:
        operation: Operation being performed (e.g., 'inference')
        data_type: Type of data being operated on (e.g., 'input rows')
        logger: Logger to use (if None, get logger based on module name)
        log_level: Log level for data operation messages

    Returns:
        Decorated function with data operation logging
    """

    def decorator(func: F) -> F:
        log = logger or get_logger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            log.log(log_level, f"Started {operation} of {data_type}")

            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed = time.perf_counter() - start_time
                log.error(
                    f"Failed {operation} of {data_type} after {elapsed:.3f}s: {e}"
                )
                raise

            elapsed = time.perf_counter() - start_time

            # Attempt to get size/count information from the result
            completion_msg = f"Completed {operation} of {data_type} in {elapsed:.3f}s"
            if hasattr(result, "__len__"):
                completion_msg += f" ({len(result)} items)"

            log.log(log_level, completion_msg)
            return result

        return cast(F, wrapper)

    return decorator
