"""Define the error taxonomy for probability levels, intervals and tests.

Every error derives from :class:`ConfidenceError`, itself a ``ValueError``, so
callers that already guard numeric routines with ``except ValueError`` keep
working.
"""

from __future__ import annotations

import math
from typing import Optional


class ConfidenceError(ValueError):
    """Base class for all errors raised by :mod:`confi`."""


class ValidationError(ConfidenceError):
    """A probability level was constructed from a value outside [0, 1] or NaN."""

    def __init__(self, value: Optional[float]):
        self.value = value
        super().__init__(
            f"a probability level must sit between 0 and 1, provided: {value!r}"
        )


class IntervalBoundsError(ConfidenceError):
    """Interval bounds are unordered or not comparable."""

    def __init__(self, start: float, end: float):
        self.start = start
        self.end = end
        if math.isnan(float(start)) or math.isnan(float(end)):
            message = f"interval bounds must not be NaN, got {start!r} -> {end!r}"
        else:
            message = f"interval start must not exceed its end, got {start!r} -> {end!r}"
        super().__init__(message)


class DistributionError(ConfidenceError):
    """A reference distribution could not be constructed or evaluated."""


class BartlettTestError(ConfidenceError):
    """Base class for Bartlett test failures."""


class InputCountError(BartlettTestError):
    """Fewer than two sample groups were supplied."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"at least two inputs are needed for a Bartlett test; got {count}"
        )


class ChiSquaredError(BartlettTestError, DistributionError):
    """The chi-squared reference distribution for a Bartlett test is invalid."""
