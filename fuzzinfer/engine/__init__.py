"""
Inference engine for fuzzinfer.
"""

from fuzzinfer.engine.inference import InferenceEngine

__all__ = ["InferenceEngine"]
