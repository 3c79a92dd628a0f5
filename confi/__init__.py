"""
Statistical-inference primitives for measurement analysis.

Expresses the uncertainty of a quantity to a stated confidence and checks
repeated measurement sets for consistent variance before they are pooled.

Modules:
    - levels: Complementary confidence and significance probability levels.
    - interval: Confidence intervals built from bounds, normal spreads or samples.
    - stats: Bartlett's test for homogeneity of variances and variance helpers.
    - errors: Error taxonomy; every error is a ``ValueError``.
"""

__version__ = "0.1.0"

from .errors import (
    BartlettTestError,
    ChiSquaredError,
    ConfidenceError,
    DistributionError,
    InputCountError,
    IntervalBoundsError,
    ValidationError,
)
from .interval import ConfidenceInterval
from .levels import ConfidenceLevel, SignificanceLevel
from .stats import (
    BartlettTestResult,
    bartlett_test,
    bartlett_test_frame,
    group_variance_summary,
    pooled_variance,
    sample_variance,
)

__all__ = [
    # Levels
    "ConfidenceLevel",
    "SignificanceLevel",
    # Intervals
    "ConfidenceInterval",
    # Tests
    "BartlettTestResult",
    "bartlett_test",
    "bartlett_test_frame",
    "group_variance_summary",
    "pooled_variance",
    "sample_variance",
    # Errors
    "ConfidenceError",
    "ValidationError",
    "IntervalBoundsError",
    "DistributionError",
    "BartlettTestError",
    "InputCountError",
    "ChiSquaredError",
]
