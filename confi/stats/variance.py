"""Per-group variance bookkeeping shared by the homogeneity tests."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np
import pandas as pd

from ..schema import VarianceColumns


def common_dtype(groups: Sequence[Any]) -> np.dtype:
    """Return the floating dtype all groups should be computed in.

    Integer and boolean data promote to float64; float32 data stays float32.
    """
    dtypes = [np.asarray(g).dtype for g in groups]
    dtypes = [d if d.kind == "f" else np.dtype(np.float64) for d in dtypes]
    return np.result_type(np.float32, *dtypes)


def as_sample(values: Any, dtype: Optional[np.dtype] = None) -> np.ndarray:
    """Coerce ``values`` to a one-dimensional floating array."""
    arr = np.asarray(values)
    if dtype is None:
        dtype = common_dtype([arr])
    arr = arr.astype(dtype, copy=False)
    if arr.ndim != 1:
        raise ValueError(f"sample groups must be one-dimensional, got shape {arr.shape}")
    return arr


def sample_variance(values: Any, dtype: Optional[np.dtype] = None) -> Any:
    """Return the Bessel-corrected sample variance of ``values``.

    Computed as ``sum((x - mean)**2) / (n - 1)`` in ``dtype``. Groups with a
    single observation give NaN and empty groups give NaN, without numpy's
    degrees-of-freedom warning.
    """
    arr = as_sample(values, dtype)
    n = arr.dtype.type(len(arr))
    with np.errstate(divide="ignore", invalid="ignore"):
        if len(arr) == 0:
            return arr.dtype.type(np.nan)
        resid = arr - arr.mean()
        return np.sum(resid * resid) / (n - 1)


def pooled_variance(groups: Sequence[Any]) -> Any:
    """Return the degrees-of-freedom weighted pooled variance of ``groups``.

    ``sp² = Σ (nᵢ - 1) sᵢ² / (N - k)``
    """
    dtype = common_dtype(groups)
    arrays = [as_sample(g, dtype) for g in groups]
    dof = np.array([len(a) - 1 for a in arrays], dtype=dtype)
    variances = np.array([sample_variance(a, dtype) for a in arrays], dtype=dtype)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.sum(dof * variances) / np.sum(dof)


def group_variance_summary(
    groups: Sequence[Any], labels: Optional[Sequence[Any]] = None
) -> pd.DataFrame:
    """Summarize size, mean and spread of each sample group.

    Args:
        groups (Sequence[array-like]): One-dimensional sample groups.
        labels (Sequence, optional): Group labels. Defaults to the position of
            each group, starting at 0.

    Returns:
        pandas.DataFrame: One row per group with the columns defined by
        :class:`~confi.schema.VarianceColumns`.

    Raises:
        ValueError: If ``labels`` and ``groups`` differ in length.
    """
    cols = VarianceColumns()
    if labels is None:
        labels = list(range(len(groups)))
    if len(labels) != len(groups):
        raise ValueError("labels and groups must be the same length.")

    dtype = common_dtype(groups) if len(groups) else np.dtype(float)
    rows = []
    for label, group in zip(labels, groups):
        arr = as_sample(group, dtype)
        var = float(sample_variance(arr, dtype))
        rows.append(
            {
                cols.group: label,
                cols.n: int(len(arr)),
                cols.mean: float(np.mean(arr)) if len(arr) else np.nan,
                cols.variance: var,
                cols.sd: float(np.sqrt(var)) if var >= 0 else np.nan,
            }
        )
    return pd.DataFrame(
        rows, columns=[cols.group, cols.n, cols.mean, cols.variance, cols.sd]
    )
