"""
Fuzzy sets: named membership functions with set algebra.

A FuzzySet pairs a display name with a membership function ℝ → ℝ
(conventionally [0, 1]; out-of-range values are not clamped). Sets are
immutable. Derived sets capture the membership *functions* of their operands,
so they stay valid independently of the operand objects and can be shared
freely across rules, engines and threads.
"""

import numbers
from collections.abc import Callable
from typing import Union

import numpy as np
import pandas as pd

from fuzzinfer import get_logger
from fuzzinfer.core.membership import MembershipFunction, MembershipFunctionFactory
from fuzzinfer.core.sampling import scan_domain
from fuzzinfer.errors import ConfigurationError, ErrorCodes

logger = get_logger(__name__)

MembershipCallable = Callable[[float], float]


def _fmax(a: float, b: float) -> float:
    # IEEE maxNum: a NaN operand yields the other operand
    return float(np.fmax(a, b))


def _fmin(a: float, b: float) -> float:
    return float(np.fmin(a, b))


class FuzzySet:
    """
    A named fuzzy set over the real line.

    Example:
        ```python
        warm = FuzzySet("warm", lambda t: max(0.0, 1.0 - abs(t - 22.0) / 6.0))
        hot = FuzzySet.from_membership("hot", "trapezoidal", [25, 30, 45, 45])

        warm_or_hot = warm.union(hot)          # name: "Union(warm, hot)"
        warm_or_hot.membership_degree(26.0)
        warm_or_hot.centroid(0.0, 45.0, 0.1)
        ```
    """

    __slots__ = ("_name", "_membership_function")

    def __init__(self, name: str, membership_function: MembershipCallable):
        """
        Create a fuzzy set.

        Args:
            name: Display label, also used as the set's category key
            membership_function: Pure function mapping x to a membership degree

        Raises:
            ConfigurationError: If membership_function is not callable
        """
        if not callable(membership_function):
            logger.error(f"Membership function for fuzzy set '{name}' is not callable")
            raise ConfigurationError(
                message=f"Membership function for fuzzy set '{name}' must be callable",
                error_code=ErrorCodes.SET_INVALID_MEMBERSHIP_FUNCTION,
                details={"name": name, "type": type(membership_function).__name__},
            )
        self._name = name
        self._membership_function = membership_function

    @classmethod
    def from_membership(
        cls, name: str, mf_type: str, parameters: list[float]
    ) -> "FuzzySet":
        """
        Build a fuzzy set from a named membership function kind.

        Args:
            name: Display label
            mf_type: "triangular", "trapezoidal" or "gaussian"
            parameters: Parameters of the membership function kind

        Raises:
            ConfigurationError: If the kind or parameters are invalid
        """
        return cls(name, MembershipFunctionFactory.create(mf_type, parameters))

    @property
    def name(self) -> str:
        return self._name

    @property
    def membership_function(self) -> MembershipCallable:
        return self._membership_function

    def membership_degree(self, x: float) -> float:
        """Evaluate the membership function at ``x``."""
        return self._membership_function(x)

    def membership_degrees(
        self, values: Union[float, pd.Series, np.ndarray]
    ) -> Union[float, pd.Series, np.ndarray]:
        """
        Evaluate the membership function for a scalar, Series or array.

        Series keep their index; arrays keep their shape. Parameterised
        membership functions use their vectorised implementation, plain
        callables are applied element by element.

        Raises:
            TypeError: If the input type is not supported
        """
        fn = self._membership_function

        if isinstance(values, numbers.Real):
            return fn(values)

        if isinstance(values, (pd.Series, np.ndarray)) and isinstance(
            fn, MembershipFunction
        ):
            return fn.evaluate(values)

        if isinstance(values, pd.Series):
            return values.apply(fn)

        if isinstance(values, np.ndarray):
            return np.vectorize(fn, otypes=[float])(values)

        logger.error(f"Unsupported input type for fuzzy set '{self._name}': {type(values)}")
        raise TypeError(
            f"Unsupported input type: {type(values)}. Expected float, pd.Series, or np.ndarray."
        )

    # ---------- set algebra ----------

    def union(self, other: "FuzzySet") -> "FuzzySet":
        """Zadeh union: μ(x) = max(μ_self(x), μ_other(x))."""
        left, right = self._membership_function, other._membership_function
        return FuzzySet(
            f"Union({self._name}, {other._name})",
            lambda x: _fmax(left(x), right(x)),
        )

    def intersection(self, other: "FuzzySet") -> "FuzzySet":
        """Zadeh intersection: μ(x) = min(μ_self(x), μ_other(x))."""
        left, right = self._membership_function, other._membership_function
        return FuzzySet(
            f"Intersection({self._name}, {other._name})",
            lambda x: _fmin(left(x), right(x)),
        )

    def complement(self) -> "FuzzySet":
        """Standard complement: μ(x) = 1 - μ_self(x)."""
        fn = self._membership_function
        return FuzzySet(f"Complement({self._name})", lambda x: 1.0 - fn(x))

    def normalize(self) -> "FuzzySet":
        """
        Scale down membership values above 1: μ(x) = μ_self(x) / max(1, μ_self(x)).

        Values already within [0, 1] are returned unchanged, so this is a
        clamp of the upper range and not a rescaling to a peak of 1. A set
        whose peak is below 1 keeps that peak.
        """
        fn = self._membership_function

        def normalized(x: float) -> float:
            value = fn(x)
            return value / _fmax(1.0, value)

        return FuzzySet(f"Normalized({self._name})", normalized)

    # ---------- quadrature ----------

    def centroid(self, min_val: float, max_val: float, step: float) -> float:
        """
        Centre of gravity of the set over [min_val, max_val].

        Computes Σ x·μ(x) / Σ μ(x) over the fixed-step scan; the step
        cancels out of the ratio. Raw membership values are used.

        Returns:
            The centroid, or 0.0 when the total membership is exactly 0.0
            (including an empty domain)

        Raises:
            ValidationError: If step is not a finite number greater than 0
        """
        numerator = 0.0
        denominator = 0.0
        for x in scan_domain(min_val, max_val, step):
            mu = self._membership_function(x)
            numerator += x * mu
            denominator += mu

        if denominator == 0.0:
            logger.debug(f"Fuzzy set '{self._name}' has no membership mass on [{min_val}, {max_val}]")
            return 0.0
        return numerator / denominator

    def __repr__(self) -> str:
        return f"FuzzySet(name={self._name!r}, membership_function={self._membership_function!r})"
