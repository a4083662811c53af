"""
Global test fixtures for the fuzzinfer project.
"""

import pytest

from fuzzinfer import FuzzyRule, FuzzySet
from fuzzinfer.core.membership import TriangularMF


@pytest.fixture
def box_set():
    """Flat-top set: membership 1.0 on [4, 6] and 0.0 elsewhere."""
    return FuzzySet("box", lambda x: 1.0 if 4.0 <= x <= 6.0 else 0.0)


@pytest.fixture
def low_set():
    """Triangle peaking at 2 on [0, 4]."""
    return FuzzySet("low", TriangularMF([0.0, 2.0, 4.0]))


@pytest.fixture
def high_set():
    """Triangle peaking at 8 on [6, 10]."""
    return FuzzySet("high", TriangularMF([6.0, 8.0, 10.0]))


@pytest.fixture
def sample_points():
    """Domain points used for pointwise property checks."""
    return [x / 4.0 for x in range(-8, 49)]


@pytest.fixture
def triage_rules():
    """Symbolic rules over a mapping of named inputs."""
    return [
        FuzzyRule(lambda d: d["temperature"] > 39.0, "Urgent", 1.0),
        FuzzyRule(lambda d: d["heart_rate"] > 110, "Medium Priority", 1.0),
        FuzzyRule(lambda d: d["temperature"] > 38.0, "High Priority", 1.0),
    ]
