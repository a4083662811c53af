"""
Inference engine: symbolic rule aggregation and continuous defuzzification.

The engine holds an ordered, read-only collection of FuzzyRule objects and
supports two independent evaluation modes:

* ``infer`` evaluates every rule against an input and reduces the matched
  label consequences to a single category through the weighted average of
  their priority scores;
* the ``defuzzify_*`` methods aggregate the fuzzy-set consequences of all
  rules with a pointwise maximum and reduce the result to a crisp number by
  centroid, mean of maximum or bisector over a fixed-step scan.
"""

import logging
from collections.abc import Iterable
from typing import Any, Optional, Union

import pandas as pd

from fuzzinfer import get_logger, log_data_operation, log_performance
from fuzzinfer.config import DefuzzificationConfig
from fuzzinfer.core.fuzzy_set import FuzzySet
from fuzzinfer.core.priority import PriorityScale
from fuzzinfer.core.rule import FuzzyRule, RuleMatch
from fuzzinfer.core.sampling import scan_domain
from fuzzinfer.errors import ConfigurationError, ErrorCodes, ProcessingError

# Set up module-level logger
logger = get_logger(__name__)


class InferenceEngine:
    """
    Rule-based fuzzy inference engine.

    The engine is stateless across calls and never mutates its rules.

    Example:
        ```python
        triage = InferenceEngine([
            FuzzyRule(lambda d: d["load"] > 90, "Urgent", 1.0),
            FuzzyRule(lambda d: d["load"] > 60, "Medium Priority", 1.0),
        ])
        triage.infer({"load": 95.0})   # (3.0 + 1.0) / 2 -> "High Priority"

        low = FuzzySet.from_membership("low", "triangular", [0, 0, 50])
        high = FuzzySet.from_membership("high", "triangular", [50, 100, 100])
        output = InferenceEngine([
            FuzzyRule(lambda x: x <= 60, low, 1.0),
            FuzzyRule(lambda x: x > 60, high, 1.0),
        ])
        output.defuzzify_centroid(0.0, 100.0, 0.5)  # 50.0, by symmetry
        ```

        Defuzzification uses the fuzzy-set consequences of every rule,
        whatever their conditions. Matched fuzzy-set rules still count in
        ``infer``, scoring the scale's default score.
    """

    def __init__(
        self,
        rules: Iterable[FuzzyRule],
        priority_scale: Optional[PriorityScale] = None,
    ):
        """
        Initialize the engine.

        Args:
            rules: Rules in evaluation order
            priority_scale: Label/score table for ``infer``; the standard
                           Urgent/High/Medium/Low scale when omitted

        Raises:
            ConfigurationError: If any rule is not a FuzzyRule
        """
        self._rules = tuple(rules)
        for index, rule in enumerate(self._rules):
            if not isinstance(rule, FuzzyRule):
                logger.error(f"Rule at index {index} is not a FuzzyRule: {rule!r}")
                raise ConfigurationError(
                    message=f"Rule at index {index} must be a FuzzyRule",
                    error_code=ErrorCodes.INFER_INVALID_RULE,
                    details={"index": index, "type": type(rule).__name__},
                )
        self._priority_scale = priority_scale or PriorityScale.standard()

        logger.debug(
            f"InferenceEngine initialized with {len(self._rules)} rules "
            f"({sum(rule.is_fuzzy for rule in self._rules)} with fuzzy-set consequences)"
        )

    @property
    def rules(self) -> tuple[FuzzyRule, ...]:
        return self._rules

    @property
    def priority_scale(self) -> PriorityScale:
        return self._priority_scale

    # ---------- symbolic inference ----------

    def evaluate_rules(self, inputs: Any) -> list[RuleMatch]:
        """
        Evaluate every rule against an input.

        Returns:
            Matches in rule order; empty when no condition holds
        """
        matches = []
        for rule in self._rules:
            match = rule.evaluate(inputs)
            if match is not None:
                matches.append(match)
        return matches

    def aggregate_score(self, matches: Iterable[RuleMatch]) -> Optional[float]:
        """
        Weighted average of the priority scores of matched consequences.

        Fuzzy-set consequences and labels missing from the priority scale
        score ``priority_scale.default_score``.

        Returns:
            Σ score·weight / Σ weight, or None when there are no matches or
            the total weight is not greater than 0
        """
        total_weight = 0.0
        weighted_sum = 0.0
        count = 0
        for consequence, weight in matches:
            weighted_sum += self._priority_scale.score_of(consequence) * weight
            total_weight += weight
            count += 1

        if count == 0:
            return None
        if not total_weight > 0.0:
            logger.debug(
                f"Total weight {total_weight} of {count} matched rules is not positive"
            )
            return None
        return weighted_sum / total_weight

    def infer(self, inputs: Any) -> str:
        """
        Infer a category for an input.

        Returns:
            The category of the aggregated score, or the scale's default
            category when no rule matches or the total weight is not positive
        """
        matches = self.evaluate_rules(inputs)
        score = self.aggregate_score(matches)
        if score is None:
            return self._priority_scale.default_label

        category = self._priority_scale.category_for(score)
        logger.debug(f"{len(matches)} rules matched, score {score:.4f} -> {category}")
        return category

    @log_data_operation("inference", "input rows", log_level=logging.DEBUG)
    def infer_batch(self, inputs: Union[pd.DataFrame, pd.Series]) -> pd.Series:
        """
        Run ``infer`` for every row of a DataFrame or element of a Series.

        DataFrame rows are passed to the rules as ``dict`` objects keyed by
        column name; Series elements are passed as scalars.

        Returns:
            Series of categories named "category" with the input's index

        Raises:
            ProcessingError: If inputs is neither a DataFrame nor a Series
        """
        if isinstance(inputs, pd.DataFrame):
            categories = [self.infer(row) for row in inputs.to_dict(orient="records")]
        elif isinstance(inputs, pd.Series):
            categories = [self.infer(value) for value in inputs.tolist()]
        else:
            raise ProcessingError(
                message=f"Unsupported batch input type: {type(inputs).__name__}",
                error_code=ErrorCodes.INFER_UNSUPPORTED_INPUT,
                details={"type": type(inputs).__name__},
                suggestion="Pass a pandas DataFrame or Series",
            )
        return pd.Series(categories, index=inputs.index, name="category", dtype=object)

    # ---------- continuous defuzzification ----------

    def fuzzy_consequences(self) -> list[FuzzySet]:
        """Fuzzy-set consequences of all rules, in rule order."""
        return [rule.consequence for rule in self._rules if rule.is_fuzzy]

    def aggregated_membership(self, x: float) -> float:
        """
        Pointwise maximum of all fuzzy-set consequences at ``x``.

        The maximum starts from 0.0, so the result is never negative and is
        0.0 when no rule has a fuzzy-set consequence.
        """
        return self._aggregate(self.fuzzy_consequences(), x)

    @staticmethod
    def _aggregate(fuzzy_sets: list[FuzzySet], x: float) -> float:
        mu_agg = 0.0
        for fuzzy_set in fuzzy_sets:
            # NaN never replaces the running maximum
            mu_agg = max(mu_agg, fuzzy_set.membership_degree(x))
        return mu_agg

    @log_performance()
    def defuzzify_centroid(self, min_val: float, max_val: float, step: float) -> float:
        """
        Centre of gravity of the aggregated output.

        Returns:
            Σ x·μ(x) / Σ μ(x) over the scan, or 0.0 when Σ μ(x) is 0.0

        Raises:
            ValidationError: If step is not a finite number greater than 0
        """
        fuzzy_sets = self.fuzzy_consequences()
        numerator = 0.0
        denominator = 0.0
        for x in scan_domain(min_val, max_val, step):
            mu = self._aggregate(fuzzy_sets, x)
            numerator += x * mu
            denominator += mu

        if denominator == 0.0:
            return 0.0
        return numerator / denominator

    @log_performance()
    def defuzzify_mom(self, min_val: float, max_val: float, step: float) -> float:
        """
        Mean of the sample points attaining the maximum aggregated membership.

        A strictly larger membership restarts the average at that point; an
        exactly equal one joins it. If the aggregate is 0.0 everywhere, every
        sample point ties and the result is their mean.

        Returns:
            The mean of maximum, or 0.0 when the scan visits no points

        Raises:
            ValidationError: If step is not a finite number greater than 0
        """
        fuzzy_sets = self.fuzzy_consequences()
        max_mu = 0.0
        sum_x = 0.0
        count = 0
        for x in scan_domain(min_val, max_val, step):
            mu = self._aggregate(fuzzy_sets, x)
            if mu > max_mu:
                max_mu = mu
                sum_x = x
                count = 1
            elif mu == max_mu:
                sum_x += x
                count += 1

        if count == 0:
            return 0.0
        return sum_x / count

    @log_performance()
    def defuzzify_bisector(self, min_val: float, max_val: float, step: float) -> float:
        """
        First sample point at which the cumulative area reaches half the total.

        Returns:
            The bisector, or ``min_val`` when the second scan never reaches
            half of the total area

        Raises:
            ValidationError: If step is not a finite number greater than 0
        """
        fuzzy_sets = self.fuzzy_consequences()
        points = scan_domain(min_val, max_val, step)
        step = float(step)

        total_area = 0.0
        for x in points:
            total_area += self._aggregate(fuzzy_sets, x) * step

        half_area = total_area / 2.0
        left_area = 0.0
        for x in scan_domain(min_val, max_val, step):
            left_area += self._aggregate(fuzzy_sets, x) * step
            if left_area >= half_area:
                return x

        return min_val

    def defuzzify(self, settings: DefuzzificationConfig) -> float:
        """
        Defuzzify with the method and scan described by ``settings``.

        Raises:
            ProcessingError: If the method is not centroid, mom or bisector
        """
        methods = {
            "centroid": self.defuzzify_centroid,
            "mom": self.defuzzify_mom,
            "bisector": self.defuzzify_bisector,
        }
        method = methods.get(settings.method)
        if method is None:
            logger.error(f"Unknown defuzzification method: {settings.method}")
            raise ProcessingError(
                message=f"Unknown defuzzification method: {settings.method}",
                error_code=ErrorCodes.INFER_UNKNOWN_METHOD,
                details={"method": settings.method, "supported_methods": list(methods)},
            )
        return method(settings.min_val, settings.max_val, settings.step)

    def __repr__(self) -> str:
        return f"InferenceEngine(rules={len(self._rules)})"
