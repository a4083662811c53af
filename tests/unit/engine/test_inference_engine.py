"""
Tests for symbolic inference with InferenceEngine.
"""

import pytest

from fuzzinfer import FuzzyRule, InferenceEngine, PriorityLevel, PriorityScale, RuleMatch
from fuzzinfer.errors import ConfigurationError


class TestEngineConstruction:
    """Tests for engine construction."""

    def test_rules_are_stored_in_order(self, triage_rules):
        engine = InferenceEngine(iter(triage_rules))

        assert engine.rules == tuple(triage_rules)
        assert engine.priority_scale == PriorityScale.standard()
        assert repr(engine) == "InferenceEngine(rules=3)"

    def test_invalid_rule_rejected(self, triage_rules):
        with pytest.raises(ConfigurationError) as exc_info:
            InferenceEngine(triage_rules + ["Urgent"])
        assert exc_info.value.error_code == "INFER-InvalidRule"
        assert exc_info.value.details["index"] == 3

    def test_empty_engine(self):
        engine = InferenceEngine([])

        assert engine.infer({"temperature": 40.0}) == "Low Priority"


class TestInfer:
    """Tests for weighted-average symbolic inference."""

    @pytest.mark.parametrize(
        "inputs,expected",
        [
            ({"temperature": 39.5, "heart_rate": 120}, "High Priority"),
            ({"temperature": 39.5, "heart_rate": 80}, "Urgent"),
            ({"temperature": 38.5, "heart_rate": 80}, "High Priority"),
            ({"temperature": 37.0, "heart_rate": 120}, "Medium Priority"),
            ({"temperature": 37.0, "heart_rate": 80}, "Low Priority"),
        ],
    )
    def test_triage(self, triage_rules, inputs, expected):
        assert InferenceEngine(triage_rules).infer(inputs) == expected

    def test_scalar_input(self):
        engine = InferenceEngine(
            [
                FuzzyRule(lambda x: x > 90, "Urgent"),
                FuzzyRule(lambda x: x > 60, "Medium Priority"),
            ]
        )

        assert engine.infer(95.0) == "High Priority"
        assert engine.infer(70.0) == "Medium Priority"
        assert engine.infer(10.0) == "Low Priority"

    def test_boundary_average_is_inclusive(self):
        engine = InferenceEngine(
            [
                FuzzyRule(lambda x: True, "Urgent", 1.0),
                FuzzyRule(lambda x: True, "High Priority", 1.0),
            ]
        )

        assert engine.aggregate_score(engine.evaluate_rules(0.0)) == 2.5
        assert engine.infer(0.0) == "Urgent"

    def test_urgent_and_medium_average_to_high(self):
        engine = InferenceEngine(
            [
                FuzzyRule(lambda x: True, "Urgent", 1.0),
                FuzzyRule(lambda x: True, "Medium Priority", 1.0),
            ]
        )

        assert engine.infer(0.0) == "High Priority"

    def test_cancelling_weights_give_default(self):
        engine = InferenceEngine(
            [
                FuzzyRule(lambda x: True, "Urgent", 1.0),
                FuzzyRule(lambda x: True, "Medium Priority", -1.0),
            ]
        )

        assert engine.infer(0.0) == "Low Priority"

    def test_zero_weight_gives_default(self):
        engine = InferenceEngine([FuzzyRule(lambda x: True, "Urgent", 0.0)])

        assert engine.infer(0.0) == "Low Priority"

    def test_negative_weight_takes_part(self):
        engine = InferenceEngine(
            [
                FuzzyRule(lambda x: True, "Urgent", 2.0),
                FuzzyRule(lambda x: True, "Medium Priority", -1.0),
            ]
        )

        # (3*2 + 1*-1) / (2 - 1) = 5.0
        assert engine.aggregate_score(engine.evaluate_rules(0.0)) == 5.0
        assert engine.infer(0.0) == "Urgent"

    def test_fuzzy_consequence_scores_default(self, low_set):
        engine = InferenceEngine(
            [
                FuzzyRule(lambda x: True, low_set),
                FuzzyRule(lambda x: True, "Urgent"),
            ]
        )

        assert engine.aggregate_score(engine.evaluate_rules(0.0)) == 1.5
        assert engine.infer(0.0) == "High Priority"

    def test_unknown_label_scores_default(self):
        engine = InferenceEngine(
            [
                FuzzyRule(lambda x: True, "Critical"),
                FuzzyRule(lambda x: True, "Urgent"),
            ]
        )

        assert engine.infer(0.0) == "High Priority"

    def test_custom_scale(self):
        scale = PriorityScale(
            levels=(
                PriorityLevel(label="page", score=10.0, threshold=7.0),
                PriorityLevel(label="ticket", score=4.0, threshold=3.0),
            ),
            default_label="ignore",
        )
        engine = InferenceEngine(
            [
                FuzzyRule(lambda d: d["errors"] > 100, "page"),
                FuzzyRule(lambda d: d["errors"] > 10, "ticket"),
            ],
            priority_scale=scale,
        )

        assert engine.infer({"errors": 500}) == "page"
        assert engine.infer({"errors": 50}) == "ticket"
        assert engine.infer({"errors": 5}) == "ignore"


class TestRuleEvaluation:
    """Tests for evaluate_rules and aggregate_score."""

    def test_matches_in_rule_order(self, triage_rules):
        engine = InferenceEngine(triage_rules)

        matches = engine.evaluate_rules({"temperature": 39.5, "heart_rate": 120})

        assert matches == [
            RuleMatch("Urgent", 1.0),
            RuleMatch("Medium Priority", 1.0),
            RuleMatch("High Priority", 1.0),
        ]

    def test_no_matches(self, triage_rules):
        engine = InferenceEngine(triage_rules)

        assert engine.evaluate_rules({"temperature": 36.0, "heart_rate": 60}) == []
        assert engine.aggregate_score([]) is None

    def test_condition_errors_propagate(self):
        engine = InferenceEngine([FuzzyRule(lambda d: d["missing"] > 1, "Urgent")])

        with pytest.raises(KeyError):
            engine.infer({"temperature": 38.0})
