"""
Core fuzzy-logic building blocks: membership functions, fuzzy sets, rules
and the priority scale.
"""

from fuzzinfer.core.fuzzy_set import FuzzySet
from fuzzinfer.core.membership import (
    GaussianMF,
    MembershipFunction,
    MembershipFunctionFactory,
    TrapezoidalMF,
    TriangularMF,
)
from fuzzinfer.core.priority import PriorityLevel, PriorityScale
from fuzzinfer.core.rule import FuzzyRule, RuleMatch
from fuzzinfer.core.sampling import scan_domain

__all__ = [
    "FuzzySet",
    "FuzzyRule",
    "RuleMatch",
    "PriorityLevel",
    "PriorityScale",
    "MembershipFunction",
    "MembershipFunctionFactory",
    "TriangularMF",
    "TrapezoidalMF",
    "GaussianMF",
    "scan_domain",
]
