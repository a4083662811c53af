"""
Configuration models for fuzzy sets, defuzzification and the priority scale.

This module defines Pydantic models for validating fuzzinfer configurations
and a loader for dictionaries and YAML files. A configuration document looks
like:

```yaml
fuzzy_sets:
  cold: {type: trapezoidal, parameters: [-10, -10, 5, 12]}
  mild: {type: triangular, parameters: [8, 16, 24]}
  hot: {type: gaussian, parameters: [32, 4]}
defuzzification:
  method: centroid
  min_val: -10
  max_val: 45
  step: 0.5
priority_scale:
  default_label: Low Priority
  levels:
    - {label: Urgent, score: 3.0, threshold: 2.5}
    - {label: High Priority, score: 2.0, threshold: 1.5}
    - {label: Medium Priority, score: 1.0, threshold: 0.5}
```

Rules are code and are never part of a configuration document.
"""

import math
from pathlib import Path
from typing import Annotated, Literal, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from fuzzinfer import get_logger
from fuzzinfer.core.fuzzy_set import FuzzySet
from fuzzinfer.core.membership import MembershipFunctionFactory
from fuzzinfer.core.priority import PriorityScale
from fuzzinfer.errors import (
    ConfigurationError,
    ConfigurationFileError,
    ErrorCodes,
    InvalidConfigurationError,
)

# Set up module-level logger
logger = get_logger(__name__)


class TriangularMFConfig(BaseModel):
    """
    Configuration for a triangular membership function.

    Parameters [a, b, c] must satisfy: a ≤ b ≤ c
    """

    type: Literal["triangular"] = "triangular"
    parameters: list[float] = Field(
        ...,
        min_length=3,
        max_length=3,
        description="Three parameters [a, b, c] defining the triangular membership function",
    )

    @field_validator("parameters")
    @classmethod
    def validate_parameters(cls, parameters: list[float]) -> list[float]:
        """
        Validate parameter ordering.

        Raises:
            ConfigurationError: If parameters are out of order
        """
        a, b, c = parameters
        if not (a <= b <= c):
            raise ConfigurationError(
                message="Triangular membership function parameters must satisfy: a ≤ b ≤ c",
                error_code=ErrorCodes.CONFIG_INVALID_PARAMETER_ORDER,
                details={"parameters": {"a": a, "b": b, "c": c}},
            )
        return parameters


class TrapezoidalMFConfig(BaseModel):
    """
    Configuration for a trapezoidal membership function.

    Parameters [a, b, c, d] must satisfy: a ≤ b ≤ c ≤ d
    """

    type: Literal["trapezoidal"] = "trapezoidal"
    parameters: list[float] = Field(
        ...,
        min_length=4,
        max_length=4,
        description="Four parameters [a, b, c, d] defining the trapezoidal membership function",
    )

    @field_validator("parameters")
    @classmethod
    def validate_parameters(cls, parameters: list[float]) -> list[float]:
        """
        Validate parameter ordering.

        Raises:
            ConfigurationError: If parameters are out of order
        """
        a, b, c, d = parameters
        if not (a <= b <= c <= d):
            raise ConfigurationError(
                message="Trapezoidal membership function parameters must satisfy: a ≤ b ≤ c ≤ d",
                error_code=ErrorCodes.CONFIG_INVALID_PARAMETER_ORDER,
                details={"parameters": {"a": a, "b": b, "c": c, "d": d}},
            )
        return parameters


class GaussianMFConfig(BaseModel):
    """
    Configuration for a Gaussian membership function with parameters [μ, σ], σ > 0.
    """

    type: Literal["gaussian"] = "gaussian"
    parameters: list[float] = Field(
        ...,
        min_length=2,
        max_length=2,
        description="Two parameters [μ, σ] defining the Gaussian membership function",
    )

    @field_validator("parameters")
    @classmethod
    def validate_parameters(cls, parameters: list[float]) -> list[float]:
        """
        Validate that sigma is positive.

        Raises:
            ConfigurationError: If sigma is not greater than 0
        """
        _, sigma = parameters
        if sigma <= 0:
            raise ConfigurationError(
                message="Gaussian membership function sigma must be greater than 0",
                error_code=ErrorCodes.CONFIG_INVALID_SIGMA,
                details={"sigma": sigma},
            )
        return parameters


# Union type for all membership function configurations with discriminator
MembershipFunctionConfig = Annotated[
    Union[TriangularMFConfig, TrapezoidalMFConfig, GaussianMFConfig],
    Field(discriminator="type"),
]


class DefuzzificationConfig(BaseModel):
    """
    Scan settings for continuous defuzzification.

    ``min_val > max_val`` is accepted and yields the empty-domain fallbacks.
    """

    method: Literal["centroid", "mom", "bisector"] = "centroid"
    min_val: float
    max_val: float
    step: float

    @field_validator("step")
    @classmethod
    def validate_step(cls, step: float) -> float:
        """
        Validate that the step is finite and positive.

        Raises:
            ConfigurationError: If the step would not terminate the scan
        """
        if not (math.isfinite(step) and step > 0):
            raise ConfigurationError(
                message="Defuzzification step must be a finite number greater than 0",
                error_code=ErrorCodes.CONFIG_INVALID_STEP,
                details={"step": step},
            )
        return step


class FuzzinferConfig(BaseModel):
    """Top-level configuration document."""

    fuzzy_sets: dict[str, MembershipFunctionConfig] = Field(default_factory=dict)
    defuzzification: Optional[DefuzzificationConfig] = None
    priority_scale: PriorityScale = Field(default_factory=PriorityScale.standard)


def build_fuzzy_sets(config: FuzzinferConfig) -> dict[str, FuzzySet]:
    """
    Create a FuzzySet for every entry of ``config.fuzzy_sets``.

    Returns:
        Mapping of set name to FuzzySet, in configuration order
    """
    fuzzy_sets = {
        name: FuzzySet(name, MembershipFunctionFactory.create(mf.type, mf.parameters))
        for name, mf in config.fuzzy_sets.items()
    }
    logger.debug(f"Built fuzzy sets: {list(fuzzy_sets)}")
    return fuzzy_sets


class FuzzyConfigLoader:
    """
    Loader for fuzzinfer configuration from dictionaries and YAML files.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the loader.

        Args:
            config_dir: Directory that relative file paths are resolved against.
                       Defaults to the current working directory.
        """
        self.config_dir = Path(config_dir) if config_dir else Path.cwd()
        logger.debug(f"Initialized FuzzyConfigLoader with config directory: {self.config_dir}")

    @staticmethod
    def load_from_dict(config_dict: dict) -> FuzzinferConfig:
        """
        Load and validate configuration from a dictionary.

        Raises:
            InvalidConfigurationError: If validation fails
        """
        try:
            logger.debug("Loading fuzzinfer configuration from dictionary")
            return FuzzinferConfig.model_validate(config_dict)
        except Exception as e:
            logger.error(f"Failed to validate fuzzinfer configuration: {e}")
            raise InvalidConfigurationError(
                message="Fuzzinfer configuration validation failed",
                error_code=ErrorCodes.CONFIG_VALIDATION_FAILED,
                details={"original_error": str(e)},
            ) from e

    def load_from_yaml(self, file_path: Union[str, Path]) -> FuzzinferConfig:
        """
        Load and validate configuration from a YAML file.

        Args:
            file_path: Path to the YAML file; relative paths are resolved
                      against the config directory

        Raises:
            ConfigurationFileError: If the file cannot be found or read
            InvalidConfigurationError: If the YAML is malformed or fails validation
        """
        path = Path(file_path)
        if not path.is_absolute():
            path = self.config_dir / path

        logger.info(f"Loading fuzzinfer configuration from file: {path}")

        if not path.exists():
            logger.error(f"Configuration file not found: {path}")
            raise ConfigurationFileError(
                message=f"Configuration file not found: {path}",
                error_code=ErrorCodes.CONFIG_FILE_NOT_FOUND,
                context={"file": str(path)},
                details={"path": str(path)},
            )

        try:
            with open(path, encoding="utf-8") as file:
                config_dict = yaml.safe_load(file)
        except yaml.YAMLError as e:
            logger.error(f"Invalid YAML format in configuration file: {e}")
            raise InvalidConfigurationError(
                message="Invalid YAML format in configuration file",
                error_code=ErrorCodes.CONFIG_INVALID_YAML,
                context={"file": str(path)},
                details={"yaml_error": str(e)},
            ) from e
        except OSError as e:
            logger.error(f"Error reading configuration file: {e}")
            raise ConfigurationFileError(
                message="Error reading configuration file",
                error_code=ErrorCodes.CONFIG_LOAD_FAILED,
                context={"file": str(path)},
                details={"error": str(e)},
            ) from e

        if config_dict is None:
            logger.warning(f"Empty configuration file: {path}")
            config_dict = {}

        if not isinstance(config_dict, dict):
            logger.error(f"Configuration file does not contain a mapping: {path}")
            raise InvalidConfigurationError(
                message="Configuration file must contain a mapping at the top level",
                error_code=ErrorCodes.CONFIG_VALIDATION_FAILED,
                context={"file": str(path)},
                details={"type": type(config_dict).__name__},
            )

        config = self.load_from_dict(config_dict)
        logger.info(
            f"Loaded configuration from {path} with {len(config.fuzzy_sets)} fuzzy sets"
        )
        return config
