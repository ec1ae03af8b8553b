"""Robust LOESS smoother.

Typical usage example:

>>> import numpy as np
>>> from loesskit import LoessSmoother
>>> x = np.arange(10.0)
>>> y = x.copy()
>>> y[5] = 100.0
>>> smoother = LoessSmoother(bandwidth=0.5, robustness_iters=2)
>>> smoothed = smoother.smooth(x, y)

Each call validates its inputs, then sweeps a local linear fit over all
points ``robustness_iters + 1`` times. Between sweeps, samples with large
residuals are down-weighted with bisquare robustness weights.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from loesskit.loess.diagnostics import make_diagnostics
from loesskit.loess.fit import local_linear_fit
from loesskit.loess.loess_config import (
    DEFAULT_ACCURACY,
    DEFAULT_BANDWIDTH,
    DEFAULT_ROBUSTNESS_ITERS,
    LoessConfig,
)
from loesskit.loess.robustness import (
    has_converged,
    median_residual,
    robustness_weights,
)
from loesskit.loess.window import advance_window, initial_window
from loesskit.logger import loesskit_logger
from loesskit.utils.errors import ConfigurationError
from loesskit.utils.validate import validate_bandwidth_in_points, validate_samples

__all__ = ["LoessSmoother", "smooth"]


def _as_float_array(values: ArrayLike | None) -> np.ndarray | None:
    """Converts input to a float NumPy array, passing None through."""
    if values is None:
        return None
    return np.asarray(values, dtype=float)


class LoessSmoother:
    """Smooths ``(x, y)`` samples with robust locally weighted linear regression."""

    def __init__(
        self,
        bandwidth: float | None = None,
        robustness_iters: int | None = None,
        accuracy: float | None = None,
        config: LoessConfig | None = None,
    ):
        """Initializes the smoother.

        Args:
            bandwidth: Fraction of points in each local window, in ``[0, 1]``.
                Defaults to 0.3.
            robustness_iters: Number of robustness iterations, ``>= 0``.
                Defaults to 2.
            accuracy: Early-stop and degeneracy threshold, finite and ``>= 0``.
                Defaults to 1e-12.
            config: A ready :class:`LoessConfig`. Cannot be combined with the
                individual settings.

        Raises:
            ConfigurationError: If any setting is out of range, or if ``config``
                is given together with an individual setting.
        """
        settings = (bandwidth, robustness_iters, accuracy)
        if config is not None:
            if any(s is not None for s in settings):
                raise ConfigurationError(
                    "Pass either config or bandwidth/robustness_iters/accuracy, not both."
                )
            self.config = config
        else:
            self.config = LoessConfig(
                bandwidth=DEFAULT_BANDWIDTH if bandwidth is None else bandwidth,
                robustness_iters=(
                    DEFAULT_ROBUSTNESS_ITERS if robustness_iters is None else robustness_iters
                ),
                accuracy=DEFAULT_ACCURACY if accuracy is None else accuracy,
            )

    @property
    def bandwidth(self) -> float:
        """Fraction of points used in each local regression window."""
        return self.config.bandwidth

    @property
    def robustness_iters(self) -> int:
        """Number of robustness iterations."""
        return self.config.robustness_iters

    @property
    def accuracy(self) -> float:
        """Early-stop threshold for robustness iterations."""
        return self.config.accuracy

    def smooth(
        self,
        x: ArrayLike,
        y: ArrayLike,
        weights: ArrayLike | None = None,
        diagnostics: bool = False,
    ) -> np.ndarray | tuple[np.ndarray, dict[str, Any]]:
        """Smooths ``y`` at the original ``x`` positions.

        Args:
            x: Strictly increasing, finite sample positions.
            y: Finite sample values, same length as ``x``.
            weights: Finite point weights multiplied into the kernel weights,
                same length as ``x``. Zero-weight samples are excluded from every
                fit. If None, all weights are 1.
            diagnostics: If True, also return a diagnostics dictionary.

        Returns:
            If diagnostics is False: a new array of smoothed values.
            If diagnostics is True: a tuple (smoothed, diagnostics_dict).

        Raises:
            ValidationError: If the inputs are missing, mismatched in length,
                empty, non-finite, not strictly increasing in ``x``, or too few
                for the configured bandwidth.
        """
        x_arr = _as_float_array(x)
        y_arr = _as_float_array(y)
        if weights is None and x_arr is not None:
            w_arr = np.ones_like(x_arr)
        else:
            w_arr = _as_float_array(weights)

        validate_samples(x_arr, y_arr, w_arr).raise_for_error()

        n = x_arr.shape[0]
        if n <= 2:
            # A line through at most two points reproduces them exactly.
            out = y_arr.copy()
            if diagnostics:
                return out, make_diagnostics(
                    self.config, n, None, 0, False, float("nan"), None, None,
                    note=f"n={n}: values returned unchanged.",
                )
            return out

        bandwidth_in_points = int(self.config.bandwidth * n)
        validate_bandwidth_in_points(bandwidth_in_points, n).raise_for_error()

        result = np.empty(n, dtype=float)
        residuals = np.empty(n, dtype=float)
        rob_weights = np.ones(n, dtype=float)

        n_sweeps = 0
        converged = False
        median = float("nan")
        degenerate: list[int] = []
        for iteration in range(self.config.robustness_iters + 1):
            n_sweeps += 1
            degenerate = self._sweep(
                x_arr, y_arr, w_arr, rob_weights, bandwidth_in_points, result, residuals
            )

            if iteration == self.config.robustness_iters:
                break

            median = median_residual(residuals)
            if has_converged(median, self.config.accuracy):
                converged = True
                loesskit_logger.info(
                    "Robustness iterations converged after %d sweep(s); "
                    "median residual %.3e < accuracy %.3e.",
                    n_sweeps, median, self.config.accuracy,
                )
                break

            rob_weights = robustness_weights(residuals, median)

        if diagnostics:
            return result, make_diagnostics(
                self.config, n, bandwidth_in_points, n_sweeps, converged, median,
                residuals, rob_weights, degenerate,
            )
        return result

    def _sweep(
        self,
        x: np.ndarray,
        y: np.ndarray,
        weights: np.ndarray,
        rob_weights: np.ndarray,
        bandwidth_in_points: int,
        result: np.ndarray,
        residuals: np.ndarray,
    ) -> list[int]:
        """Fits every point once, filling ``result`` and ``residuals`` in place.

        Returns:
            Indices whose local slope was forced to 0.
        """
        degenerate = []
        window = initial_window(bandwidth_in_points)
        for i in range(x.shape[0]):
            if i > 0:
                window = advance_window(window, x, weights, i)
            fit = local_linear_fit(
                x, y, weights, rob_weights, i, window, self.config.accuracy
            )
            result[i] = fit.value
            residuals[i] = abs(y[i] - fit.value)
            if fit.degenerate:
                degenerate.append(i)
        return degenerate


def smooth(
    x: ArrayLike,
    y: ArrayLike,
    weights: ArrayLike | None = None,
    *,
    bandwidth: float = DEFAULT_BANDWIDTH,
    robustness_iters: int = DEFAULT_ROBUSTNESS_ITERS,
    accuracy: float = DEFAULT_ACCURACY,
    diagnostics: bool = False,
) -> np.ndarray | tuple[np.ndarray, dict[str, Any]]:
    """Smooths ``y`` at ``x`` with a one-off :class:`LoessSmoother`.

    See :meth:`LoessSmoother.smooth` for the arguments and return value.
    """
    smoother = LoessSmoother(
        bandwidth=bandwidth, robustness_iters=robustness_iters, accuracy=accuracy
    )
    return smoother.smooth(x, y, weights, diagnostics=diagnostics)
