"""Weighted local linear fit at a single evaluation point."""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np

from loesskit.kernels import tricube
from loesskit.loess.window import Window
from loesskit.logger import loesskit_logger

__all__ = ["LocalFit", "local_linear_fit"]


class LocalFit(NamedTuple):
    """Result of one local regression.

    Attributes:
        value: Fitted value at the evaluation point.
        slope: Local slope ``beta`` (0 for a degenerate window).
        intercept: Local intercept ``alpha``.
        total_weight: Sum of the combined weights in the window.
        degenerate: True if the weighted spread of ``x`` was below ``accuracy``
            and the slope was forced to 0.
    """

    value: float
    slope: float
    intercept: float
    total_weight: float
    degenerate: bool


def local_linear_fit(
    x: np.ndarray,
    y: np.ndarray,
    weights: np.ndarray,
    robustness_weights: np.ndarray,
    i: int,
    window: Window,
    accuracy: float,
) -> LocalFit:
    """Fits a tricube-weighted line over ``window`` and evaluates it at ``x[i]``.

    The kernel scale is set by the window edge farther from ``x[i]``, so that
    edge itself gets zero kernel weight. Each sample's weight is the product
    of its kernel weight, its robustness weight and its point weight.

    Args:
        x: Strictly increasing sample positions.
        y: Sample values.
        weights: Point weights.
        robustness_weights: Robustness weights from the previous sweep.
        i: Evaluation index.
        window: Inclusive neighborhood ``[left, right]``.
        accuracy: Threshold on the weighted standard deviation of ``x`` below
            which the slope is set to 0.

    Window sums use ``np.sum``, so values agree with a sequential
    accumulation only to rounding.

    Returns:
        A :class:`LocalFit`. The fitted value is NaN if every sample in the
        window has zero combined weight, or if ``accuracy`` is 0 and the
        weighted samples share a single ``x``.
    """
    left, right = window
    xi = x[i]

    edge = left if xi - x[left] > x[right] - xi else right
    denom = abs(1.0 / (x[edge] - xi))

    xk = x[left:right + 1]
    yk = y[left:right + 1]
    w = (
        tricube(np.abs(xk - xi) * denom)
        * robustness_weights[left:right + 1]
        * weights[left:right + 1]
    )

    sum_weights = float(np.sum(w))
    if sum_weights == 0.0:
        loesskit_logger.warning(
            "All samples in window [%d, %d] around index %d have zero weight; "
            "the fitted value is NaN.", left, right, i,
        )
        nan = float("nan")
        return LocalFit(nan, nan, nan, 0.0, False)

    xkw = xk * w
    mean_x = float(np.sum(xkw)) / sum_weights
    mean_x_sq = float(np.sum(xk * xkw)) / sum_weights
    mean_y = float(np.sum(yk * w)) / sum_weights
    mean_xy = float(np.sum(yk * xkw)) / sum_weights

    var_x = mean_x_sq - mean_x * mean_x
    degenerate = math.sqrt(abs(var_x)) < accuracy
    if not degenerate and var_x == 0.0:
        # No spread in x and accuracy == 0: the slope is undefined.
        loesskit_logger.warning(
            "Window [%d, %d] around index %d has no spread in x and accuracy is 0; "
            "the fitted value is NaN.", left, right, i,
        )
        nan = float("nan")
        return LocalFit(nan, nan, nan, sum_weights, False)
    beta = 0.0 if degenerate else (mean_xy - mean_x * mean_y) / var_x
    alpha = mean_y - beta * mean_x

    return LocalFit(beta * xi + alpha, beta, alpha, sum_weights, degenerate)
