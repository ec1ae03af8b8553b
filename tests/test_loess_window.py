"""Unit tests for the sliding LOESS window."""

import numpy as np

from loesskit.loess.window import (
    Window,
    advance_window,
    initial_window,
    next_nonzero,
)


def test_initial_window_spans_bandwidth_in_points():
    """Tests that the first window covers indices 0..bandwidth_in_points-1."""
    assert initial_window(4) == Window(0, 3)


def test_next_nonzero_skips_zero_weights():
    """Tests that zero-weight samples are skipped."""
    w = np.array([1.0, 0.0, 0.0, 2.0, 0.0])
    assert next_nonzero(w, 0) == 3
    assert next_nonzero(w, 3) == 5


def test_advance_window_moves_when_next_right_is_closer():
    """Tests that the window shifts once the next right sample is nearer."""
    x = np.arange(6.0)
    w = np.ones(6)
    assert advance_window(Window(0, 1), x, w, 2) == Window(1, 2)


def test_advance_window_keeps_window_on_tie_or_farther():
    """Tests that equal or larger distances leave the window unchanged."""
    x = np.arange(6.0)
    w = np.ones(6)
    # x[3] is farther from x[1] than x[0] is
    assert advance_window(Window(0, 2), x, w, 1) == Window(0, 2)
    # tie: x[2] - x[1] == x[1] - x[0]
    assert advance_window(Window(0, 1), x, w, 1) == Window(0, 1)


def test_advance_window_stops_at_last_sample():
    """Tests that the window never moves past the end of the data."""
    x = np.arange(4.0)
    w = np.ones(4)
    assert advance_window(Window(2, 3), x, w, 3) == Window(2, 3)


def test_advance_window_skips_zero_weight_samples():
    """Tests that both edges jump over samples with zero point weight."""
    x = np.arange(6.0)
    w = np.array([1.0, 1.0, 1.0, 0.0, 1.0, 1.0])
    window = advance_window(Window(0, 1), x, w, 2)
    assert window == Window(1, 2)
    window = advance_window(window, x, w, 3)
    assert window == Window(2, 4)


def test_window_only_moves_forward_over_a_sweep():
    """Tests that edges are monotone and keep their width over a sweep."""
    rng = np.random.default_rng(3)
    x = np.cumsum(rng.uniform(0.1, 2.0, size=50))
    w = np.ones_like(x)
    window = initial_window(7)
    for i in range(1, x.size):
        new = advance_window(window, x, w, i)
        assert new.left >= window.left
        assert new.right >= window.right
        assert new.right - new.left == 6
        window = new
