"""Sliding neighborhood window for one LOESS sweep.

As the evaluation index moves left to right, the window only ever moves
forward, so both edges advance at most ``n`` times over a whole sweep.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

__all__ = ["Window", "initial_window", "next_nonzero", "advance_window"]


class Window(NamedTuple):
    """Inclusive index interval ``[left, right]`` of the local neighborhood."""

    left: int
    right: int


def initial_window(bandwidth_in_points: int) -> Window:
    """Returns the window used for the first evaluation index."""
    return Window(0, bandwidth_in_points - 1)


def next_nonzero(weights: np.ndarray, i: int) -> int:
    """Returns the first index after ``i`` whose point weight is nonzero.

    Args:
        weights: Point weights.
        i: Starting index (excluded).

    Returns:
        The index found, or ``len(weights)`` if there is none.
    """
    j = i + 1
    n = weights.shape[0]
    while j < n and weights[j] == 0.0:
        j += 1
    return j


def advance_window(
    window: Window,
    x: np.ndarray,
    weights: np.ndarray,
    i: int,
) -> Window:
    """Moves the window one step forward if that brings it closer to ``x[i]``.

    The candidate right edge is the next sample with nonzero point weight.
    If it is nearer to ``x[i]`` than the current left edge, both edges move
    to their next nonzero-weight samples; otherwise the window is kept.

    Args:
        window: Window used for the previous evaluation index.
        x: Strictly increasing sample positions.
        weights: Point weights; zero-weight samples are skipped.
        i: Current evaluation index.

    Returns:
        The window for index ``i``.
    """
    left, right = window
    next_right = next_nonzero(weights, right)
    if next_right < x.shape[0] and x[next_right] - x[i] < x[i] - x[left]:
        return Window(next_nonzero(weights, left), next_right)
    return window
