"""Diagnostics for a LOESS smoothing call."""

from __future__ import annotations

from typing import Any, Dict, Sequence

import numpy as np

from loesskit.loess.loess_config import LoessConfig

__all__ = ["make_diagnostics"]


def make_diagnostics(
    config: LoessConfig,
    n: int,
    bandwidth_in_points: int | None,
    n_sweeps: int,
    converged: bool,
    median: float,
    residuals: np.ndarray | None,
    robustness_weights: np.ndarray | None,
    degenerate_points: Sequence[int] = (),
    note: str | None = None,
) -> Dict[str, Any]:
    """Builds diagnostics dictionary.

    Args:
        config:
            Settings of the smoother that produced the result.
        n:
            Number of samples.
        bandwidth_in_points:
            Window size in points, or None if the main algorithm was bypassed.
        n_sweeps:
            Number of fit sweeps actually run.
        converged:
            Whether robustness iterations stopped early on a small median residual.
        median:
            Last median residual computed, NaN if none was.
        residuals:
            Absolute residuals from the final sweep.
        robustness_weights:
            Robustness weights used in the final sweep.
        degenerate_points:
            Indices whose local slope was forced to 0 in the final sweep.
        note:
            Optional free-text remark.

    Returns:
        A diagnostics dictionary.
    """
    diag: Dict[str, Any] = {
        "n": int(n),
        "bandwidth": float(config.bandwidth),
        "bandwidth_in_points": None if bandwidth_in_points is None else int(bandwidth_in_points),
        "robustness_iters": int(config.robustness_iters),
        "accuracy": float(config.accuracy),
        "n_sweeps": int(n_sweeps),
        "converged": bool(converged),
        "median_residual": float(median),
        "residuals": [] if residuals is None else residuals.tolist(),
        "robustness_weights": [] if robustness_weights is None else robustness_weights.tolist(),
        "degenerate_points": [int(k) for k in degenerate_points],
    }
    if note is not None:
        diag["note"] = note
    return diag
