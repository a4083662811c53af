"""
Priority scale used by symbolic inference.

A PriorityScale maps consequence labels to numeric scores for weighted
averaging, and maps an averaged score back to a label through inclusive
lower thresholds. Labels that are not on the scale, and fuzzy-set
consequences, score ``default_score``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fuzzinfer import get_logger
from fuzzinfer.errors import ConfigurationError, ErrorCodes

logger = get_logger(__name__)


class PriorityLevel(BaseModel):
    """
    One category of the scale.

    An averaged score ``s`` maps to this level when ``s >= threshold`` and no
    level with a higher threshold also matches.
    """

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1, description="Category label")
    score: float = Field(..., description="Score contributed by a matching rule")
    threshold: float = Field(
        ..., description="Inclusive lower bound of averaged scores mapping here"
    )


class PriorityScale(BaseModel):
    """
    Label/score/threshold table with a default category.

    The standard scale is:

    | label           | score | threshold |
    |-----------------|-------|-----------|
    | Urgent          | 3.0   | 2.5       |
    | High Priority   | 2.0   | 1.5       |
    | Medium Priority | 1.0   | 0.5       |
    | Low Priority    | 0.0   | (default) |
    """

    model_config = ConfigDict(frozen=True)

    levels: tuple[PriorityLevel, ...]
    default_label: str = "Low Priority"
    default_score: float = 0.0

    @model_validator(mode="after")
    def validate_levels(self) -> "PriorityScale":
        """
        Validate that the scale has levels and that labels are unique.

        Raises:
            ConfigurationError: If the scale is empty or labels repeat
        """
        if not self.levels:
            raise ConfigurationError(
                message="Priority scale must define at least one level",
                error_code=ErrorCodes.CONFIG_EMPTY_PRIORITY_SCALE,
                details={},
            )

        labels = [level.label for level in self.levels] + [self.default_label]
        duplicates = sorted({label for label in labels if labels.count(label) > 1})
        if duplicates:
            raise ConfigurationError(
                message=f"Priority scale labels must be unique: {', '.join(duplicates)}",
                error_code=ErrorCodes.CONFIG_DUPLICATE_PRIORITY_LABEL,
                details={"duplicates": duplicates},
                suggestion="Give every level, and the default category, its own label",
            )
        return self

    @classmethod
    def standard(cls) -> "PriorityScale":
        """The standard Urgent / High / Medium / Low scale."""
        return cls(
            levels=(
                PriorityLevel(label="Urgent", score=3.0, threshold=2.5),
                PriorityLevel(label="High Priority", score=2.0, threshold=1.5),
                PriorityLevel(label="Medium Priority", score=1.0, threshold=0.5),
            ),
            default_label="Low Priority",
            default_score=0.0,
        )

    def score_of(self, consequence: Any) -> float:
        """
        Score of a rule consequence.

        Known labels return their level score; any other value (unknown
        labels, the default label, fuzzy sets) returns ``default_score``.
        """
        if isinstance(consequence, str):
            for level in self.levels:
                if level.label == consequence:
                    return level.score
        return self.default_score

    def category_for(self, score: float) -> str:
        """
        Category of an averaged score.

        Levels are tried from the highest threshold down; boundary values
        belong to the higher category. A score matching no level, including
        NaN, returns ``default_label``.
        """
        for level in sorted(self.levels, key=lambda lv: lv.threshold, reverse=True):
            if score >= level.threshold:
                return level.label
        return self.default_label
