"""
Tests for package metadata.
"""

import fuzzinfer
from fuzzinfer.version import get_version


def test_version():
    assert fuzzinfer.__version__ == "0.1.0"
    assert get_version() == fuzzinfer.__version__


def test_public_api():
    for name in ("FuzzySet", "FuzzyRule", "InferenceEngine", "PriorityScale"):
        assert name in fuzzinfer.__all__
        assert hasattr(fuzzinfer, name)
