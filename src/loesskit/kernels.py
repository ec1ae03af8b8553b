"""Weight functions used by the LOESS smoother."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

__all__ = ["tricube", "bisquare"]


def tricube(u: ArrayLike) -> float | np.ndarray:
    """Evaluates the tricube kernel ``(1 - |u|^3)^3`` on ``|u| < 1``, else 0.

    The kernel is symmetric, equals 1 at ``u = 0`` and decays smoothly to 0
    at ``|u| = 1``.

    Args:
        u: Scalar or array of scaled distances.

    Returns:
        A float for scalar input, otherwise an array with the shape of ``u``.
    """
    a = np.abs(np.asarray(u, dtype=float))
    tmp = 1.0 - a * a * a
    out = np.where(a >= 1.0, 0.0, tmp * tmp * tmp)
    return float(out) if out.ndim == 0 else out


def bisquare(u: ArrayLike) -> float | np.ndarray:
    """Evaluates the bisquare weight ``(1 - u^2)^2`` on ``|u| < 1``, else 0.

    Args:
        u: Scalar or array of scaled residuals.

    Returns:
        A float for scalar input, otherwise an array with the shape of ``u``.
    """
    a = np.abs(np.asarray(u, dtype=float))
    tmp = 1.0 - a * a
    out = np.where(a >= 1.0, 0.0, tmp * tmp)
    return float(out) if out.ndim == 0 else out
