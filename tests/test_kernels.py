"""Tests for loesskit.kernels."""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from loesskit.kernels import bisquare, tricube


def test_tricube_is_one_at_zero():
    """Tests that the tricube kernel equals 1 at zero distance."""
    assert tricube(0.0) == 1.0


@pytest.mark.parametrize("u", [1.0, -1.0, 1.5, -3.0, 1e9])
def test_tricube_vanishes_outside_unit_interval(u):
    """Tests that the tricube kernel is 0 for |u| >= 1."""
    assert tricube(u) == 0.0


def test_tricube_is_symmetric():
    """Tests that tricube(u) == tricube(-u)."""
    u = np.linspace(-1.2, 1.2, 49)
    assert_allclose(tricube(u), tricube(-u), rtol=0.0, atol=0.0)


def test_tricube_matches_closed_form_inside_support():
    """Tests tricube against (1 - |u|^3)^3 on |u| < 1."""
    u = np.array([-0.9, -0.5, 0.25, 0.5, 0.75])
    expected = (1.0 - np.abs(u) ** 3) ** 3
    assert_allclose(tricube(u), expected, rtol=1e-15)


def test_tricube_scalar_in_float_out():
    """Tests that scalar input yields a Python float."""
    assert isinstance(tricube(0.5), float)
    assert tricube(np.array([0.5])).shape == (1,)


def test_bisquare_values():
    """Tests bisquare at the center, inside the support and at the edge."""
    assert bisquare(0.0) == 1.0
    assert bisquare(0.5) == pytest.approx(0.5625)
    assert bisquare(1.0) == 0.0
    assert bisquare(-2.0) == 0.0
