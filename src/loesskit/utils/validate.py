"""Validation utilities for LoessKit.

Configuration checks raise immediately, since a smoother with invalid
settings must never be constructed. Sample checks instead return a
:class:`ValidationResult` so that the caller decides when to raise; they
inspect the inputs only and never allocate working buffers.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from loesskit.utils.errors import (
    ConfigurationError,
    ValidationError,
    ValidationErrorKind,
)

__all__ = [
    "ValidationResult",
    "validate_loess_config",
    "validate_samples",
    "validate_bandwidth_in_points",
]


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one smoothing call's inputs.

    Attributes:
        ok: True if every precondition holds.
        kind: The first violated precondition, or None on success.
        message: Human-readable description of the failure (empty on success).
    """

    ok: bool
    kind: ValidationErrorKind | None = None
    message: str = ""

    @classmethod
    def success(cls) -> ValidationResult:
        """Returns a successful result."""
        return cls(ok=True)

    @classmethod
    def failure(cls, kind: ValidationErrorKind, message: str) -> ValidationResult:
        """Returns a failed result carrying the violated precondition."""
        return cls(ok=False, kind=kind, message=message)

    def raise_for_error(self) -> None:
        """Raises :class:`ValidationError` if this result is a failure."""
        if not self.ok:
            raise ValidationError(self.kind, self.message)


def validate_loess_config(
    bandwidth: float,
    robustness_iters: int,
    accuracy: float,
) -> None:
    """Validates smoother settings.

    Args:
        bandwidth: Fraction of points in each local window; must lie in ``[0, 1]``.
        robustness_iters: Number of robustness iterations; integer ``>= 0``.
        accuracy: Convergence and degeneracy threshold; finite and ``>= 0``.

    Raises:
        ConfigurationError: If any setting is out of range.
    """
    if isinstance(bandwidth, bool) or not isinstance(bandwidth, numbers.Real):
        raise ConfigurationError(f"bandwidth must be a real number; got {bandwidth!r}.")
    if not 0.0 <= float(bandwidth) <= 1.0:
        raise ConfigurationError(f"bandwidth must be in [0, 1]; got {bandwidth}.")

    if isinstance(robustness_iters, bool) or not isinstance(robustness_iters, numbers.Integral):
        raise ConfigurationError(
            f"robustness_iters must be an integer; got {robustness_iters!r}."
        )
    if robustness_iters < 0:
        raise ConfigurationError(f"robustness_iters must be >= 0; got {robustness_iters}.")

    if isinstance(accuracy, bool) or not isinstance(accuracy, numbers.Real):
        raise ConfigurationError(f"accuracy must be a real number; got {accuracy!r}.")
    if not math.isfinite(accuracy) or accuracy < 0.0:
        raise ConfigurationError(f"accuracy must be finite and >= 0; got {accuracy}.")


def validate_samples(
    x: NDArray[np.floating] | None,
    y: NDArray[np.floating] | None,
    weights: NDArray[np.floating] | None,
) -> ValidationResult:
    """Checks the sample arrays of one smoothing call.

    Requirements, reported in this order:
      - ``x``, ``y`` and ``weights`` are given.
      - All three are 1D.
      - ``len(y) == len(x)`` and ``len(weights) == len(x)``.
      - The arrays are not empty.
      - Every element of ``x``, ``y`` and ``weights`` is finite.
      - ``x`` is strictly increasing (no duplicates).

    Args:
        x: Sample positions.
        y: Sample values.
        weights: Point weights.

    Returns:
        A :class:`ValidationResult` describing the first violated requirement,
        or a successful result.
    """
    for name, arr in (("x", x), ("y", y), ("weights", weights)):
        if arr is None:
            return ValidationResult.failure(
                ValidationErrorKind.MISSING, f"{name} must not be None."
            )
    for name, arr in (("x", x), ("y", y), ("weights", weights)):
        if arr.ndim != 1:
            return ValidationResult.failure(
                ValidationErrorKind.NOT_ONE_DIMENSIONAL,
                f"{name} must be 1D; got ndim={arr.ndim}.",
            )

    if x.shape[0] != y.shape[0]:
        return ValidationResult.failure(
            ValidationErrorKind.LENGTH_MISMATCH,
            f"x and y must have the same length; got {x.shape[0]} and {y.shape[0]}.",
        )
    if weights.shape[0] != x.shape[0]:
        return ValidationResult.failure(
            ValidationErrorKind.LENGTH_MISMATCH,
            "weights must have the same length as x and y; "
            f"got {weights.shape[0]} and {x.shape[0]}.",
        )
    if x.shape[0] == 0:
        return ValidationResult.failure(
            ValidationErrorKind.EMPTY, "Input arrays must not be empty."
        )

    for name, arr in (("x", x), ("y", y), ("weights", weights)):
        if not np.all(np.isfinite(arr)):
            return ValidationResult.failure(
                ValidationErrorKind.NON_FINITE,
                f"All elements of {name} must be finite (no NaN/inf).",
            )

    if not np.all(np.diff(x) > 0):
        return ValidationResult.failure(
            ValidationErrorKind.NOT_STRICTLY_INCREASING,
            "x must be strictly increasing (no duplicates).",
        )

    return ValidationResult.success()


def validate_bandwidth_in_points(bandwidth_in_points: int, n: int) -> ValidationResult:
    """Checks that each local window holds enough points for a line fit.

    Args:
        bandwidth_in_points: ``floor(bandwidth * n)``.
        n: Number of samples.

    Returns:
        A failed result if fewer than 2 points fall in a window.
    """
    if bandwidth_in_points < 2:
        return ValidationResult.failure(
            ValidationErrorKind.BANDWIDTH_TOO_SMALL,
            f"bandwidth too small for n={n}: need at least 2 points in each "
            f"window; got {bandwidth_in_points}.",
        )
    return ValidationResult.success()
