"""
fuzzinfer - fuzzy-logic inference and defuzzification toolkit.
"""

import os

from dotenv import load_dotenv

from fuzzinfer.logging import (
    configure_logging,
    get_logger,
    is_debug_mode,
    log_data_operation,
    log_performance,
    set_debug_mode,
)
from fuzzinfer.version import __version__

# Load environment variables from .env file
load_dotenv()

configure_logging(
    log_dir=os.environ.get("FUZZINFER_LOG_DIR") or None,
    config={
        "debug_mode": os.environ.get("FUZZINFER_DEBUG", "").lower()
        in ("1", "true", "yes")
    },
)

from fuzzinfer.core.fuzzy_set import FuzzySet  # noqa: E402
from fuzzinfer.core.priority import PriorityLevel, PriorityScale  # noqa: E402
from fuzzinfer.core.rule import FuzzyRule, RuleMatch  # noqa: E402
from fuzzinfer.engine.inference import InferenceEngine  # noqa: E402

__all__ = [
    "__version__",
    # Logging
    "configure_logging",
    "get_logger",
    "is_debug_mode",
    "set_debug_mode",
    "log_performance",
    "log_data_operation",
    # Core
    "FuzzySet",
    "FuzzyRule",
    "RuleMatch",
    "PriorityLevel",
    "PriorityScale",
    "InferenceEngine",
]
