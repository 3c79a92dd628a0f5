"""Represent confidence and significance as complementary probability levels.

A confidence level is the probability that a stated interval encloses the
true value of a measurand. The significance level is its complement: the
probability of a type I error, rejecting a null hypothesis which is in fact
true. In a measurement model the null hypothesis is typically that a reading
is indistinguishable from another, or from the system response at zero
stimulus (the minimum detectable value).

Both types wrap a fraction in [0, 1] and are validated on construction::

    >>> SignificanceLevel.fractional(0.1) == SignificanceLevel.percentage(10.0)
    True
    >>> str(ConfidenceLevel.ninety_five_percent().to_significance())
    'Significance Level: 5.000%'

The stored fraction keeps the float type it was built from, so a level built
from ``numpy.float32`` stays single precision through conversion.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np

from .errors import ValidationError
from .stats.distributions import standard_normal_ppf

PERCENT = 100.0


def _validated(level: Any) -> Any:
    if isinstance(level, bool) or not isinstance(level, numbers.Real):
        raise TypeError(f"probability level must be numeric, got {type(level)}")
    # only binary floats keep their type; ints and Fractions become float
    if not isinstance(level, (float, np.floating)):
        level = float(level)
    # NaN fails both comparisons, so test it explicitly
    if math.isnan(float(level)) or level < 0 or level > 1:
        raise ValidationError(float(level))
    return level


@dataclass(frozen=True)
class ConfidenceLevel:
    """The degree of confidence associated with a value to be computed."""

    fraction: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "fraction", _validated(self.fraction))

    def __str__(self) -> str:
        return f"Confidence Level: {float(self.fraction) * PERCENT:.3f}%"

    @classmethod
    def fractional(cls, level: Any) -> "ConfidenceLevel":
        """Create a confidence level from a fraction.

        Raises:
            ValidationError: If ``level`` is outside [0, 1] or NaN.
        """
        return cls(level)

    @classmethod
    def percentage(cls, level: Any) -> "ConfidenceLevel":
        """Create a confidence level from a percentage.

        Raises:
            ValidationError: If ``level`` is outside [0, 100] or NaN. The
                error carries the value after division by 100.
        """
        return cls(level / PERCENT)

    @classmethod
    def from_significance(cls, significance: "SignificanceLevel") -> "ConfidenceLevel":
        return cls(1 - significance.fraction)

    @classmethod
    def ninety_nine_point_nine_percent(cls, dtype: Callable = float) -> "ConfidenceLevel":
        return cls(dtype(0.999))

    @classmethod
    def ninety_nine_point_five_percent(cls, dtype: Callable = float) -> "ConfidenceLevel":
        return cls(dtype(0.995))

    @classmethod
    def ninety_nine_percent(cls, dtype: Callable = float) -> "ConfidenceLevel":
        return cls(dtype(0.99))

    @classmethod
    def ninety_seven_point_five_percent(cls, dtype: Callable = float) -> "ConfidenceLevel":
        return cls(dtype(0.975))

    @classmethod
    def ninety_five_percent(cls, dtype: Callable = float) -> "ConfidenceLevel":
        return cls(dtype(0.95))

    @classmethod
    def ninety_percent(cls, dtype: Callable = float) -> "ConfidenceLevel":
        return cls(dtype(0.9))

    def probability(self) -> Any:
        """Return the fraction wrapped by this level."""
        return self.fraction

    def to_significance(self) -> "SignificanceLevel":
        return SignificanceLevel.from_confidence(self)

    def astype(self, dtype: Callable) -> "ConfidenceLevel":
        """Return the same level stored as ``dtype`` (for example ``float``)."""
        return ConfidenceLevel(dtype(self.fraction))


@dataclass(frozen=True)
class SignificanceLevel:
    """The significance level, expressed as a fraction.

    It represents the probability of a type I error, which corresponds to
    rejection of a null hypothesis which is in fact true.
    """

    fraction: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "fraction", _validated(self.fraction))

    def __str__(self) -> str:
        return f"Significance Level: {float(self.fraction) * PERCENT:.3f}%"

    @classmethod
    def fractional(cls, level: Any) -> "SignificanceLevel":
        """Create a significance level from a fraction.

        Raises:
            ValidationError: If ``level`` is outside [0, 1] or NaN.
        """
        return cls(level)

    @classmethod
    def percentage(cls, level: Any) -> "SignificanceLevel":
        """Create a significance level from a percentage.

        Raises:
            ValidationError: If ``level`` is outside [0, 100] or NaN.
        """
        return cls(level / PERCENT)

    @classmethod
    def from_confidence(cls, confidence: ConfidenceLevel) -> "SignificanceLevel":
        return cls(1 - confidence.fraction)

    @classmethod
    def zero_point_one_percent(cls, dtype: Callable = float) -> "SignificanceLevel":
        return cls(dtype(0.001))

    @classmethod
    def zero_point_five_percent(cls, dtype: Callable = float) -> "SignificanceLevel":
        return cls(dtype(0.005))

    @classmethod
    def one_percent(cls, dtype: Callable = float) -> "SignificanceLevel":
        return cls(dtype(0.01))

    @classmethod
    def two_point_five_percent(cls, dtype: Callable = float) -> "SignificanceLevel":
        return cls(dtype(0.025))

    @classmethod
    def five_percent(cls, dtype: Callable = float) -> "SignificanceLevel":
        return cls(dtype(0.05))

    @classmethod
    def ten_percent(cls, dtype: Callable = float) -> "SignificanceLevel":
        return cls(dtype(0.1))

    def probability(self) -> Any:
        """Return the fraction wrapped by this level."""
        return self.fraction

    def to_confidence(self) -> ConfidenceLevel:
        return ConfidenceLevel.from_significance(self)

    def astype(self, dtype: Callable) -> "SignificanceLevel":
        """Return the same level stored as ``dtype`` (for example ``float``)."""
        return SignificanceLevel(dtype(self.fraction))

    def num_standard_deviations(self) -> Any:
        """Return the one-sided number of standard deviations for this level.

        This is the inverse cumulative distribution function of the standard
        normal distribution evaluated at ``1 - significance``: the point of a
        unit-variance measurand beyond which only ``significance`` of the
        probability mass lies.

        Returns:
            Number of standard deviations, in the float type of the level.
            Zero significance gives ``+inf``.

        Raises:
            DistributionError: If the normal quantile cannot be evaluated.
        """
        z = standard_normal_ppf(1.0 - float(self.fraction))
        return type(self.fraction)(z)
