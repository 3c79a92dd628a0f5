"""Describe the range of values a quantity can take, to a stated confidence.

A :class:`ConfidenceInterval` is an inclusive range expected to enclose the
estimated parameter, paired with the :class:`~confi.levels.ConfidenceLevel`
giving the probability that it does::

    >>> level = ConfidenceLevel.fractional(0.1)
    >>> ConfidenceInterval.new((1.0, 3.0), level).contains(2.0)
    True
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

import numpy as np

from .errors import IntervalBoundsError
from .levels import ConfidenceLevel, SignificanceLevel
from .stats.distributions import student_t_ppf

DEFAULT_CONFIDENCE = 0.95


def _resolve_level(level: Optional[ConfidenceLevel]) -> ConfidenceLevel:
    if level is None:
        return ConfidenceLevel.fractional(DEFAULT_CONFIDENCE)
    return level


@dataclass(frozen=True)
class ConfidenceInterval:
    """An inclusive range paired with the confidence that it holds the true value.

    Attributes:
        start: Lower bound, inclusive.
        end: Upper bound, inclusive. Must not be below ``start``.
        level: Probability that ``[start, end]`` encloses the estimated
            parameter.
    """

    start: Any
    end: Any
    level: ConfidenceLevel

    def __post_init__(self) -> None:
        if math.isnan(float(self.start)) or math.isnan(float(self.end)):
            raise IntervalBoundsError(self.start, self.end)
        if self.start > self.end:
            raise IntervalBoundsError(self.start, self.end)

    def __str__(self) -> str:
        return (
            f"Confidence Interval: {float(self.start):.3e} -> "
            f"{float(self.end):.3e} ({self.level})"
        )

    @classmethod
    def new(cls, bounds: Tuple[Any, Any], level: ConfidenceLevel) -> "ConfidenceInterval":
        """Build an interval from a ``(start, end)`` pair.

        Raises:
            IntervalBoundsError: If ``start > end`` or either bound is NaN.
        """
        start, end = bounds
        return cls(start, end, level)

    @classmethod
    def from_normal(
        cls,
        mean: float,
        std: float,
        level: Optional[ConfidenceLevel] = None,
    ) -> "ConfidenceInterval":
        """Build a symmetric two-sided interval for a normally distributed quantity.

        The half-width is ``z * std`` where ``z`` leaves ``alpha / 2`` of the
        probability in each tail, ``alpha`` being the complement of ``level``.

        Args:
            mean (float): Centre of the distribution.
            std (float): Standard deviation, in the units of ``mean``.
            level (ConfidenceLevel, optional): Defaults to 95%.

        Returns:
            ConfidenceInterval: ``[mean - z*std, mean + z*std]``.

        Raises:
            ValueError: If ``std`` is negative or non-finite.
        """
        level = _resolve_level(level)
        if not math.isfinite(std) or std < 0:
            raise ValueError(f"std must be finite and non-negative, got {std}")
        alpha = level.to_significance().probability()
        z = SignificanceLevel.fractional(alpha / 2).num_standard_deviations()
        # zero spread stays a point even when z is unbounded
        half = z * std if std > 0 else 0.0
        return cls(mean - half, mean + half, level)

    @classmethod
    def from_samples(
        cls,
        values: Iterable[float],
        level: Optional[ConfidenceLevel] = None,
    ) -> "ConfidenceInterval":
        """Build a Student-t interval for the mean of repeated measurements.

        Args:
            values (Iterable[float]): Replicate readings. Non-finite values
                are dropped.
            level (ConfidenceLevel, optional): Defaults to 95%.

        Returns:
            ConfidenceInterval: ``mean ± t * s / sqrt(n)`` with ``n - 1``
            degrees of freedom.

        Raises:
            ValueError: If fewer than two finite values remain.

        Note:
            The interval describes statistical scatter only and does not
            include systematic instrument uncertainty.
        """
        level = _resolve_level(level)
        arr = np.asarray(list(values), dtype=float)
        arr = arr[np.isfinite(arr)]
        n = int(len(arr))
        if n < 2:
            raise ValueError("Insufficient valid data for a sample confidence interval.")

        mean = float(np.mean(arr))
        se = float(np.std(arr, ddof=1)) / math.sqrt(n)
        alpha = float(level.to_significance().probability())
        t_crit = student_t_ppf(1.0 - alpha / 2.0, n - 1)
        half = t_crit * se if se > 0 else 0.0
        return cls(mean - half, mean + half, level)

    @property
    def range(self) -> Tuple[Any, Any]:
        return (self.start, self.end)

    def confidence_level(self) -> ConfidenceLevel:
        return self.level

    def width(self) -> Any:
        return self.end - self.start

    def half_width(self) -> Any:
        return self.width() / 2

    def contains(self, value: Any) -> bool:
        """Return True if ``value`` lies within the interval, bounds included."""
        return bool(self.start <= value <= self.end)
