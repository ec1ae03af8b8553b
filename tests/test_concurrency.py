"""Tests that a shared smoother can be used from several threads."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import numpy as np
from numpy.testing import assert_array_equal

from loesskit import LoessSmoother


def test_concurrent_calls_match_serial_calls():
    """Tests that threaded calls on independent inputs equal serial calls."""
    rng = np.random.default_rng(0)
    x = np.linspace(0.0, 10.0, 120)
    datasets = [np.cos(x) + 0.2 * rng.normal(size=x.size) for _ in range(8)]
    smoother = LoessSmoother(bandwidth=0.3, robustness_iters=3)

    serial = [smoother.smooth(x, y) for y in datasets]
    with ThreadPoolExecutor(max_workers=4) as ex:
        threaded = list(ex.map(lambda y: smoother.smooth(x, y), datasets))

    for a, b in zip(serial, threaded):
        assert_array_equal(a, b)
