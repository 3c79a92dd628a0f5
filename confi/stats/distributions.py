"""Guarded evaluations of the reference distributions used by confi.

``scipy.stats`` returns NaN rather than raising for invalid parameters. These
wrappers turn invalid parameters into :class:`~confi.errors.DistributionError`
so that a bad significance level or degrees of freedom never leaks out as a
plausible-looking number. NaN evaluation points still propagate as NaN.
"""

from __future__ import annotations

import math

from scipy import stats as scipy_stats

from ..errors import ChiSquaredError, DistributionError


def _check_dof(df: float, error: type[DistributionError], name: str) -> float:
    df = float(df)
    if not math.isfinite(df) or df <= 0:
        raise error(f"{name} degrees of freedom must be finite and positive, got {df}")
    return df


def standard_normal_ppf(p: float) -> float:
    """Return ``z`` such that the standard normal CDF at ``z`` equals ``p``.

    Args:
        p (float): Target cumulative probability in [0, 1].

    Returns:
        float: Quantile of ``N(0, 1)``. ``p = 0`` gives ``-inf`` and ``p = 1``
        gives ``+inf``.

    Raises:
        DistributionError: If ``p`` is NaN or outside [0, 1].
    """
    p = float(p)
    if math.isnan(p) or p < 0.0 or p > 1.0:
        raise DistributionError(f"normal quantile requires p in [0, 1], got {p}")
    return float(scipy_stats.norm(loc=0.0, scale=1.0).ppf(p))


def student_t_ppf(p: float, df: float) -> float:
    """Return the Student-t quantile at ``p`` for ``df`` degrees of freedom."""
    df = _check_dof(df, DistributionError, "Student-t")
    p = float(p)
    if math.isnan(p) or p < 0.0 or p > 1.0:
        raise DistributionError(f"t quantile requires p in [0, 1], got {p}")
    return float(scipy_stats.t(df).ppf(p))


def chi2_sf(x: float, df: float) -> float:
    """Return the chi-squared survival function ``1 - CDF(x)``.

    The argument is the chi-squared variate itself (scipy uses the textbook
    parameterization), so no square-root adjustment is applied.

    Args:
        x (float): Evaluation point. NaN propagates.
        df (float): Degrees of freedom.

    Returns:
        float: Upper-tail probability.

    Raises:
        ChiSquaredError: If ``df`` is non-finite or not positive.
    """
    df = _check_dof(df, ChiSquaredError, "chi-squared")
    return float(scipy_stats.chi2(df).sf(float(x)))
