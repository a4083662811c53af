"""
Fixed-step scanning of a real interval.

Every quadrature in the package (set centroid and the three engine
defuzzifiers) visits the domain through ``scan_domain``. The scan starts at
``min_val`` and repeatedly adds ``step`` while ``x <= max_val``; the points
are accumulated rather than computed as ``min_val + i * step``, so whether
``max_val`` itself is visited depends on floating-point drift.
"""

import math
import numbers
from collections.abc import Iterator

from fuzzinfer import get_logger
from fuzzinfer.errors import ErrorCodes, ValidationError

logger = get_logger(__name__)


def validate_step(step: float) -> None:
    """
    Reject steps that would keep the scan from terminating.

    Raises:
        ValidationError: If step is not a finite number greater than 0
    """
    if not (isinstance(step, numbers.Real) and math.isfinite(step) and step > 0):
        logger.error(f"Invalid scan step: {step!r}")
        raise ValidationError(
            message="Scan step must be a finite number greater than 0",
            error_code=ErrorCodes.SCAN_INVALID_STEP,
            details={"step": step},
            suggestion="Pass a positive step, e.g. (max_val - min_val) / 100",
        )


def scan_domain(min_val: float, max_val: float, step: float) -> Iterator[float]:
    """
    Return an iterator over the sample points of [min_val, max_val].

    The step is validated eagerly; an empty iterator is returned when
    ``min_val > max_val``.

    Args:
        min_val: First sample point
        max_val: Inclusive upper bound (subject to accumulated drift)
        step: Increment between consecutive points

    Raises:
        ValidationError: If step is not a finite number greater than 0
    """
    validate_step(step)
    if min_val > max_val:
        logger.warning(
            f"Empty scan domain: min_val={min_val} is greater than max_val={max_val}"
        )
    return _points(min_val, max_val, float(step))


def _points(min_val: float, max_val: float, step: float) -> Iterator[float]:
    x = min_val
    while x <= max_val:
        yield x
        x += step
