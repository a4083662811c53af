"""
Tests for batch inference over pandas inputs.
"""

import logging

import pandas as pd
import pytest

from fuzzinfer import FuzzyRule, InferenceEngine
from fuzzinfer.errors import ProcessingError


@pytest.fixture
def patients():
    return pd.DataFrame(
        {
            "temperature": [39.5, 38.5, 37.0, 37.0],
            "heart_rate": [120, 80, 120, 80],
        },
        index=["p1", "p2", "p3", "p4"],
    )


class TestInferBatch:
    """Tests for InferenceEngine.infer_batch."""

    def test_dataframe_rows(self, triage_rules, patients):
        engine = InferenceEngine(triage_rules)

        result = engine.infer_batch(patients)

        expected = pd.Series(
            ["High Priority", "High Priority", "Medium Priority", "Low Priority"],
            index=["p1", "p2", "p3", "p4"],
            name="category",
            dtype=object,
        )
        pd.testing.assert_series_equal(result, expected)

    def test_matches_row_by_row_inference(self, triage_rules, patients):
        engine = InferenceEngine(triage_rules)

        result = engine.infer_batch(patients)

        for label, row in patients.iterrows():
            assert result[label] == engine.infer(row.to_dict())

    def test_series_elements(self):
        engine = InferenceEngine(
            [
                FuzzyRule(lambda x: x > 90, "Urgent"),
                FuzzyRule(lambda x: x > 60, "Medium Priority"),
            ]
        )
        loads = pd.Series([95.0, 70.0, 10.0], index=[10, 20, 30])

        result = engine.infer_batch(loads)

        assert result.tolist() == ["High Priority", "Medium Priority", "Low Priority"]
        assert result.index.tolist() == [10, 20, 30]

    def test_empty_dataframe(self, triage_rules):
        engine = InferenceEngine(triage_rules)

        result = engine.infer_batch(pd.DataFrame(columns=["temperature", "heart_rate"]))

        assert result.empty
        assert result.name == "category"

    def test_unsupported_input(self, triage_rules):
        engine = InferenceEngine(triage_rules)

        with pytest.raises(ProcessingError) as exc_info:
            engine.infer_batch([{"temperature": 39.0, "heart_rate": 80}])
        assert exc_info.value.error_code == "INFER-UnsupportedBatchInput"

    def test_operation_is_logged(self, triage_rules, patients, caplog):
        engine = InferenceEngine(triage_rules)

        with caplog.at_level(logging.DEBUG, logger="fuzzinfer"):
            engine.infer_batch(patients)

        assert "Started inference of input rows" in caplog.text
        assert "Completed inference of input rows" in caplog.text
        assert "(4 items)" in caplog.text

    def test_operation_is_quiet_at_info(self, triage_rules, patients, caplog):
        engine = InferenceEngine(triage_rules)

        with caplog.at_level(logging.INFO, logger="fuzzinfer"):
            engine.infer_batch(patients)

        assert "inference of input rows" not in caplog.text
