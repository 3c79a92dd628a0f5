"""
Statistical routines for variance homogeneity.

Modules:
    bartlett:
        Bartlett's test for equal variances across two or more sample groups,
        with a long-form DataFrame entry point.

    variance:
        Bessel-corrected and pooled variances, and per-group summaries.

    distributions:
        Guarded evaluations of the normal, Student-t and chi-squared
        reference distributions from ``scipy.stats``.

Design Principle:
    This subpackage has no dependency on the probability-level or interval
    types; it operates on arrays and primitive types only.
"""

from .bartlett import BartlettTestResult, bartlett_test, bartlett_test_frame
from .distributions import chi2_sf, standard_normal_ppf, student_t_ppf
from .variance import group_variance_summary, pooled_variance, sample_variance

__all__ = [
    "BartlettTestResult",
    "bartlett_test",
    "bartlett_test_frame",
    "chi2_sf",
    "standard_normal_ppf",
    "student_t_ppf",
    "group_variance_summary",
    "pooled_variance",
    "sample_variance",
]
