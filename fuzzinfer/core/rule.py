"""
Weighted if-then rules.

A rule guards a consequence with a predicate over the engine input. The
input is whatever the caller passes to the engine: a scalar, or a mapping of
named scalars. The consequence is either a category label (symbolic
inference) or a FuzzySet (defuzzification).
"""

from collections.abc import Callable
from typing import Any, NamedTuple, Optional, Union

from fuzzinfer import get_logger
from fuzzinfer.core.fuzzy_set import FuzzySet
from fuzzinfer.errors import ConfigurationError, ErrorCodes

logger = get_logger(__name__)

Consequence = Union[str, FuzzySet]
Condition = Callable[[Any], bool]


class RuleMatch(NamedTuple):
    """Consequence and weight of a rule whose condition held."""

    consequence: Consequence
    weight: float


class FuzzyRule:
    """
    A weighted rule ``IF condition(input) THEN consequence``.

    The weight is not validated: zero and negative weights are accepted and
    take part in aggregation as given.

    Example:
        ```python
        rule = FuzzyRule(lambda d: d["temperature"] > 30, "Urgent", weight=2.0)
        rule.evaluate({"temperature": 35.0})  # RuleMatch("Urgent", 2.0)
        rule.evaluate({"temperature": 20.0})  # None
        ```
    """

    __slots__ = ("_condition", "_consequence", "_weight")

    def __init__(
        self, condition: Condition, consequence: Consequence, weight: float = 1.0
    ):
        """
        Create a rule.

        Args:
            condition: Predicate over the engine input
            consequence: Category label or fuzzy set produced when the condition holds
            weight: Relative influence of the rule in aggregation

        Raises:
            ConfigurationError: If condition is not callable or consequence is
                neither a string nor a FuzzySet
        """
        if not callable(condition):
            logger.error(f"Rule condition is not callable: {condition!r}")
            raise ConfigurationError(
                message="Rule condition must be callable",
                error_code=ErrorCodes.RULE_INVALID_CONDITION,
                details={"type": type(condition).__name__},
            )
        if not isinstance(consequence, (str, FuzzySet)):
            logger.error(f"Invalid rule consequence: {consequence!r}")
            raise ConfigurationError(
                message="Rule consequence must be a category label or a FuzzySet",
                error_code=ErrorCodes.RULE_INVALID_CONSEQUENCE,
                details={"type": type(consequence).__name__},
                suggestion="Pass a string such as 'Urgent' or a FuzzySet instance",
            )

        self._condition = condition
        self._consequence = consequence
        self._weight = float(weight)

    @property
    def condition(self) -> Condition:
        return self._condition

    @property
    def consequence(self) -> Consequence:
        return self._consequence

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def is_symbolic(self) -> bool:
        return isinstance(self._consequence, str)

    @property
    def is_fuzzy(self) -> bool:
        return isinstance(self._consequence, FuzzySet)

    def evaluate(self, inputs: Any) -> Optional[RuleMatch]:
        """
        Evaluate the rule against an input.

        Returns:
            RuleMatch when the condition holds, None otherwise
        """
        if self._condition(inputs):
            return RuleMatch(self._consequence, self._weight)
        return None

    def __repr__(self) -> str:
        consequence = (
            self._consequence if self.is_symbolic else self._consequence.name
        )
        return f"FuzzyRule(consequence={consequence!r}, weight={self._weight})"
