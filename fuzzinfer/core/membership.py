"""
Membership function kinds for fuzzy sets.

This module defines the abstract base class for parameterised membership
functions and the triangular, trapezoidal and Gaussian kinds. Instances are
callable, so they can be handed to FuzzySet directly as membership functions.
"""

import numbers
from abc import ABC, abstractmethod
from typing import Union

import numpy as np
import pandas as pd

from fuzzinfer import get_logger
from fuzzinfer.errors import ConfigurationError, ErrorCodes

# Set up module-level logger
logger = get_logger(__name__)


class MembershipFunction(ABC):
    """
    Abstract base class for parameterised membership functions.

    Subclasses implement ``_evaluate_scalar`` and ``_evaluate_array``;
    ``evaluate`` dispatches on the input type.
    """

    def __call__(self, x: float) -> float:
        return self._evaluate_scalar(x)

    def evaluate(
        self, x: Union[float, pd.Series, np.ndarray]
    ) -> Union[float, pd.Series, np.ndarray]:
        """
        Evaluate the membership function for given input value(s).

        Args:
            x: Input value(s) to evaluate

        Returns:
            Membership degree(s) in the range [0, 1]

        Raises:
            TypeError: If the input type is not supported
        """
        if isinstance(x, numbers.Real):
            return self._evaluate_scalar(x)

        elif isinstance(x, pd.Series):
            logger.debug(f"Evaluating {self!r} for pandas Series of length {len(x)}")
            return x.apply(self._evaluate_scalar)

        elif isinstance(x, np.ndarray):
            logger.debug(f"Evaluating {self!r} for numpy array of shape {x.shape}")
            values = x.astype(float)
            result = self._evaluate_array(values)
            nan_mask = np.isnan(values)
            if nan_mask.any():
                logger.warning(f"NaN values encountered in input to {self!r}")
                result[nan_mask] = np.nan
            return result

        else:
            logger.error(f"Unsupported input type for {self!r}: {type(x)}")
            raise TypeError(
                f"Unsupported input type: {type(x)}. Expected float, pd.Series, or np.ndarray."
            )

    @abstractmethod
    def _evaluate_scalar(self, x: float) -> float:
        pass

    @abstractmethod
    def _evaluate_array(self, x: np.ndarray) -> np.ndarray:
        pass


def _check_parameter_count(kind: str, parameters: list[float], expected: int, names: str):
    if len(parameters) != expected:
        logger.error(
            f"Invalid {kind} MF parameters: expected {expected}, got {len(parameters)}"
        )
        raise ConfigurationError(
            message=f"{kind.capitalize()} membership function requires exactly {expected} parameters {names}",
            error_code=ErrorCodes.MF_INVALID_PARAMETER_COUNT,
            details={"expected": expected, "actual": len(parameters)},
        )


class TriangularMF(MembershipFunction):
    """
    Triangular membership function with parameters [a, b, c].

    - μ(x) = 0,                 if x <= a or x >= c
    - μ(x) = (x - a) / (b - a), if a < x < b
    - μ(x) = 1,                 if x = b
    - μ(x) = (c - x) / (c - b), if b < x < c

    Shoulders (a = b or b = c) and singletons (a = b = c) are allowed.
    """

    def __init__(self, parameters: list[float]):
        """
        Initialize a triangular membership function.

        Args:
            parameters: Three parameters [a, b, c] with a ≤ b ≤ c

        Raises:
            ConfigurationError: If parameters are invalid
        """
        _check_parameter_count("triangular", parameters, 3, "[a, b, c]")

        self.a, self.b, self.c = (float(p) for p in parameters)

        if not (self.a <= self.b <= self.c):
            logger.error(
                f"Invalid triangular MF parameter order: a={self.a}, b={self.b}, c={self.c}"
            )
            raise ConfigurationError(
                message="Triangular membership function parameters must satisfy: a ≤ b ≤ c",
                error_code=ErrorCodes.MF_INVALID_PARAMETER_ORDER,
                details={"parameters": {"a": self.a, "b": self.b, "c": self.c}},
            )

        # Avoid division by zero on degenerate edges
        self._ab_diff = max(self.b - self.a, np.finfo(float).eps)
        self._bc_diff = max(self.c - self.b, np.finfo(float).eps)

    def _evaluate_scalar(self, x: float) -> float:
        if pd.isna(x):
            return np.nan

        if x == self.b:
            return 1.0
        if x <= self.a or x >= self.c:
            return 0.0
        if x < self.b:
            return (x - self.a) / self._ab_diff
        return (self.c - x) / self._bc_diff

    def _evaluate_array(self, x: np.ndarray) -> np.ndarray:
        result = np.zeros_like(x, dtype=float)

        rising = (x > self.a) & (x < self.b)
        result[rising] = (x[rising] - self.a) / self._ab_diff

        falling = (x > self.b) & (x < self.c)
        result[falling] = (self.c - x[falling]) / self._bc_diff

        result[x == self.b] = 1.0
        return result

    def __repr__(self) -> str:
        return f"TriangularMF(a={self.a}, b={self.b}, c={self.c})"


class TrapezoidalMF(MembershipFunction):
    """
    Trapezoidal membership function with parameters [a, b, c, d].

    - μ(x) = 0,                 if x <= a or x >= d
    - μ(x) = (x - a) / (b - a), if a < x < b
    - μ(x) = 1,                 if b <= x <= c
    - μ(x) = (d - x) / (d - c), if c < x < d
    """

    def __init__(self, parameters: list[float]):
        """
        Initialize a trapezoidal membership function.

        Args:
            parameters: Four parameters [a, b, c, d] with a ≤ b ≤ c ≤ d

        Raises:
            ConfigurationError: If parameters are invalid
        """
        _check_parameter_count("trapezoidal", parameters, 4, "[a, b, c, d]")

        self.a, self.b, self.c, self.d = (float(p) for p in parameters)

        if not (self.a <= self.b <= self.c <= self.d):
            logger.error(
                f"Invalid trapezoidal MF parameter order: a={self.a}, b={self.b}, c={self.c}, d={self.d}"
            )
            raise ConfigurationError(
                message="Trapezoidal membership function parameters must satisfy: a ≤ b ≤ c ≤ d",
                error_code=ErrorCodes.MF_INVALID_PARAMETER_ORDER,
                details={
                    "parameters": {"a": self.a, "b": self.b, "c": self.c, "d": self.d}
                },
            )

        self._ab_diff = max(self.b - self.a, np.finfo(float).eps)
        self._dc_diff = max(self.d - self.c, np.finfo(float).eps)

    def _evaluate_scalar(self, x: float) -> float:
        if pd.isna(x):
            return np.nan

        if self.b <= x <= self.c:
            return 1.0
        if x <= self.a or x >= self.d:
            return 0.0
        if x < self.b:
            return (x - self.a) / self._ab_diff
        return (self.d - x) / self._dc_diff

    def _evaluate_array(self, x: np.ndarray) -> np.ndarray:
        result = np.zeros_like(x, dtype=float)

        rising = (x > self.a) & (x < self.b)
        result[rising] = (x[rising] - self.a) / self._ab_diff

        result[(x >= self.b) & (x <= self.c)] = 1.0

        falling = (x > self.c) & (x < self.d)
        result[falling] = (self.d - x[falling]) / self._dc_diff
        return result

    def __repr__(self) -> str:
        return f"TrapezoidalMF(a={self.a}, b={self.b}, c={self.c}, d={self.d})"


class GaussianMF(MembershipFunction):
    """
    Gaussian membership function with parameters [μ, σ].

    μ(x) = exp(-0.5 * ((x - μ) / σ)²)
    """

    def __init__(self, parameters: list[float]):
        """
        Initialize a Gaussian membership function.

        Args:
            parameters: Two parameters [μ, σ] with σ > 0

        Raises:
            ConfigurationError: If parameters are invalid
        """
        _check_parameter_count("gaussian", parameters, 2, "[μ, σ]")

        self.mu, self.sigma = (float(p) for p in parameters)

        if self.sigma <= 0:
            logger.error(f"Invalid Gaussian MF sigma: {self.sigma} (must be > 0)")
            raise ConfigurationError(
                message="Gaussian membership function sigma must be greater than 0",
                error_code=ErrorCodes.MF_INVALID_SIGMA,
                details={"sigma": self.sigma},
            )

    def _evaluate_scalar(self, x: float) -> float:
        if pd.isna(x):
            return np.nan
        z = (x - self.mu) / self.sigma
        return float(np.exp(-0.5 * z * z))

    def _evaluate_array(self, x: np.ndarray) -> np.ndarray:
        z = (x - self.mu) / self.sigma
        return np.exp(-0.5 * z * z)

    def __repr__(self) -> str:
        return f"GaussianMF(μ={self.mu}, σ={self.sigma})"


class MembershipFunctionFactory:
    """
    Factory for creating membership function instances by kind name.
    """

    _KINDS = {
        "triangular": TriangularMF,
        "trapezoidal": TrapezoidalMF,
        "gaussian": GaussianMF,
    }

    @staticmethod
    def create(mf_type: str, parameters: list[float]) -> MembershipFunction:
        """
        Create a membership function instance based on type and parameters.

        Args:
            mf_type: Type of membership function ("triangular", "trapezoidal", "gaussian")
            parameters: Parameters for the membership function

        Returns:
            MembershipFunction instance

        Raises:
            ConfigurationError: If the membership function type is unknown
        """
        kind = MembershipFunctionFactory._KINDS.get(mf_type.lower())
        if kind is None:
            logger.error(f"Unknown membership function type: {mf_type}")
            raise ConfigurationError(
                message=f"Unknown membership function type: {mf_type}",
                error_code=ErrorCodes.MF_UNKNOWN_TYPE,
                details={
                    "type": mf_type,
                    "supported_types": MembershipFunctionFactory.get_supported_types(),
                },
                suggestion="Use one of: triangular, trapezoidal, gaussian",
            )
        return kind(parameters)

    @staticmethod
    def get_supported_types() -> list[str]:
        """
        Get list of supported membership function types.

        Returns:
            List of supported membership function type names
        """
        return list(MembershipFunctionFactory._KINDS)
