"""Define standardized column names for variance and test-result DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VarianceColumns:
    """Container for per-group variance summary column labels.

    Attributes:
        group: Group label, taken from the grouping column or the position of
            the group in the call.
        n: Number of observations in the group.
        mean: Arithmetic mean of the group.
        variance: Bessel-corrected sample variance (denominator ``n - 1``).
            NaN for single-observation groups.
        sd: Square root of ``variance``.
    """

    group: str = "Group"
    n: str = "n"
    mean: str = "Mean"
    variance: str = "Variance"
    sd: str = "SD"


@dataclass(frozen=True)
class TestResultKeys:
    """Keys of the dictionaries returned by ``BartlettTestResult.to_dict``."""

    stat: str = "stat"
    pvalue: str = "pvalue"
    df: str = "df"
    k: str = "k"
    method: str = "method"
    notes: str = "notes"
