"""Robustness reweighting from the residuals of a full sweep."""

from __future__ import annotations

import numpy as np

from loesskit.kernels import bisquare

__all__ = ["median_residual", "has_converged", "robustness_weights"]


def median_residual(residuals: np.ndarray) -> float:
    """Returns the upper-middle element of the sorted residuals.

    This is ``sorted(residuals)[n // 2]``; for even ``n`` the two middle
    elements are not averaged. NaN residuals, left by windows without any
    weighted sample, are ordered before all numbers.
    """
    nan_mask = np.isnan(residuals)
    ordered = np.concatenate([residuals[nan_mask], np.sort(residuals[~nan_mask])])
    return float(ordered[residuals.shape[0] // 2])


def has_converged(median: float, accuracy: float) -> bool:
    """True if the median residual is below ``accuracy``."""
    return abs(median) < accuracy


def robustness_weights(residuals: np.ndarray, median: float) -> np.ndarray:
    """Computes bisquare robustness weights for the next sweep.

    Args:
        residuals: Absolute residuals of the last sweep.
        median: Median residual from :func:`median_residual`; must be nonzero.

    Returns:
        ``(1 - r^2)^2`` with ``r = residual / (6 * median)``, and 0 where
        ``r >= 1``.
    """
    return np.asarray(bisquare(residuals / (6.0 * median)), dtype=float)
