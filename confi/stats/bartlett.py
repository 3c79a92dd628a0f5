"""Bartlett's test for homogeneity of variances.

The test validates the null hypothesis that two or more sample groups are
drawn from normal distributions with equal variance. Repeated measurement
sets should pass it before they are pooled or compared.

For groups of sizes ``nᵢ`` with sample variances ``sᵢ²`` (``N = Σ nᵢ`` over
``k`` groups)::

    sp² = Σ (nᵢ - 1) sᵢ² / (N - k)
    T   = [(N - k) ln sp² - Σ (nᵢ - 1) ln sᵢ²]
          / [1 + (Σ 1/(nᵢ - 1) - 1/(N - k)) / (3 (k - 1))]

and ``T`` follows a chi-squared distribution with ``k - 1`` degrees of
freedom under the null hypothesis.

References:
    Bartlett, M. S. (1937). Properties of sufficiency and statistical tests.
    NIST/SEMATECH e-Handbook of Statistical Methods, section 1.3.5.7.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict

import numpy as np
import pandas as pd

from ..errors import InputCountError
from ..schema import TestResultKeys
from .distributions import chi2_sf
from .variance import as_sample, common_dtype, sample_variance

if TYPE_CHECKING:
    from ..levels import SignificanceLevel

logger = logging.getLogger(__name__)

METHOD_NAME = "Bartlett"


@dataclass(frozen=True)
class BartlettTestResult:
    """Outcome of a Bartlett test.

    Attributes:
        statistic: Bartlett's ``T``, in the floating dtype of the input.
        pvalue: Chi-squared upper-tail probability of ``statistic``.
        k: Number of groups tested.
        df: Degrees of freedom of the reference distribution, ``k - 1``.
        notes: Free-text caveats, empty for a well-posed test.
    """

    statistic: Any
    pvalue: Any
    k: int
    df: int
    notes: str = ""

    def rejects(self, significance: "SignificanceLevel") -> bool:
        """Return True if equal variances are rejected at ``significance``.

        A NaN p-value never rejects.
        """
        return bool(self.pvalue < significance.probability())

    def to_dict(self) -> Dict[str, Any]:
        keys = TestResultKeys()
        return {
            keys.stat: float(self.statistic),
            keys.pvalue: float(self.pvalue),
            keys.df: int(self.df),
            keys.k: int(self.k),
            keys.method: METHOD_NAME,
            keys.notes: self.notes,
        }


def bartlett_test(*groups: Any) -> BartlettTestResult:
    """Test whether sample groups share a common variance.

    Args:
        *groups (array-like): Two or more one-dimensional sample groups. Each
            group should hold at least two observations with non-zero spread.

    Returns:
        BartlettTestResult: Statistic and p-value, both in the common floating
        dtype of the inputs (float32 input stays float32).

    Raises:
        InputCountError: If fewer than two groups are given.
        ChiSquaredError: If the chi-squared reference distribution cannot be
            built.

    Note:
        Degenerate groups (fewer than two observations or zero variance) are
        not rejected. The statistic and p-value propagate as non-finite or
        boundary values and a ``RuntimeWarning`` is emitted.
    """
    if len(groups) < 2:
        raise InputCountError(len(groups))

    dtype = common_dtype(groups)
    one = dtype.type(1)
    three = dtype.type(3)
    samples = [as_sample(g, dtype) for g in groups]

    k = len(samples)
    sizes = np.array([len(s) for s in samples], dtype=dtype)
    variances = np.array([sample_variance(s, dtype) for s in samples], dtype=dtype)
    input_count = dtype.type(k)
    total = np.sum(sizes)
    logger.debug(
        "Bartlett test on %d groups with sizes %s", k, [len(s) for s in samples]
    )

    degenerate = [
        i for i, (n, v) in enumerate(zip(sizes, variances)) if n < 2 or not v > 0
    ]

    with np.errstate(divide="ignore", invalid="ignore"):
        dof = sizes - one
        spsq = np.sum(dof * variances) / (total - input_count)
        numer = (total - input_count) * np.log(spsq) - np.sum(dof * np.log(variances))
        denom = one + one / (three * (input_count - one)) * (
            np.sum(one / dof) - one / (total - input_count)
        )
        statistic = dtype.type(numer / denom)

    pvalue = dtype.type(chi2_sf(statistic, k - 1))

    notes = ""
    if degenerate:
        notes = f"Degenerate groups {degenerate}: need >= 2 observations and non-zero variance."
        warnings.warn(
            f"Bartlett test is undefined for degenerate groups {degenerate}; "
            "statistic and p-value are not meaningful.",
            RuntimeWarning,
            stacklevel=2,
        )

    logger.debug("Bartlett statistic=%s pvalue=%s", statistic, pvalue)
    return BartlettTestResult(
        statistic=statistic, pvalue=pvalue, k=k, df=k - 1, notes=notes
    )


def bartlett_test_frame(
    df: pd.DataFrame, group_col: str, value_col: str
) -> BartlettTestResult:
    """Run Bartlett's test on a long-form table of replicate measurements.

    Args:
        df (pandas.DataFrame): One row per observation.
        group_col (str): Column identifying the group of each observation.
            Groups are tested in sorted order.
        value_col (str): Column holding the measured values.

    Returns:
        BartlettTestResult: As for :func:`bartlett_test`.

    Raises:
        ValueError: If either column is missing.
        InputCountError: If the table holds fewer than two groups.
    """
    missing = {group_col, value_col} - set(df.columns)
    if missing:
        raise ValueError(f"Input data is missing required columns: {sorted(missing)}")

    groups = [
        grp[value_col].to_numpy()
        for _, grp in df.groupby(group_col, sort=True)
    ]
    return bartlett_test(*groups)
