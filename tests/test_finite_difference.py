"""Focused tests for finite-difference estimates of callables."""

import math
from functools import partial

import numpy as np
import pytest

from fdkit.finite.difference import (
    backward_difference,
    central_difference,
    finite_difference,
    five_point_central_difference,
    forward_difference,
    second_central_difference,
)


def quad(x, a=2.0, b=-3.0, c=1.5):
    """Quadratic function for testing."""
    return a * x**2 + b * x + c


def quartic(x):
    """Quartic from the worked problems: f'(1) = -1, f''(1) = 0."""
    return x**4 - 2 * x**3 + x


def test_central_matches_analytic_sine():
    """Central differences match cos(x) for sin(x)."""
    x0 = math.pi / 4
    assert np.isclose(central_difference(math.sin, x0, 0.01), math.cos(x0), atol=1e-4)


def test_central_is_exact_for_quadratic():
    """Central differences have no truncation error on a quadratic."""
    f = partial(quad, a=3.0, b=-1.0, c=2.0)
    assert np.isclose(central_difference(f, 0.3, 0.1), 2 * 3.0 * 0.3 - 1.0, atol=1e-10)


def test_one_sided_errors_have_opposite_sign_on_convex_function():
    """On a convex function forward overestimates and backward underestimates."""
    f = partial(quad, a=1.0, b=0.0, c=0.0)
    assert forward_difference(f, 1.0, 0.1) > 2.0
    assert backward_difference(f, 1.0, 0.1) < 2.0
    assert np.isclose(forward_difference(f, 1.0, 0.1), 2.1)
    assert np.isclose(backward_difference(f, 1.0, 0.1), 1.9)


def test_five_point_exact_for_quartic():
    """The five-point formula has no truncation error up to degree four."""
    assert np.isclose(five_point_central_difference(quartic, 1.0, 0.1), -1.0, atol=1e-10)


def test_second_central_on_exponential():
    """Second central difference approximates f'' = e**x."""
    est = second_central_difference(math.exp, 1.0, 1e-3)
    assert np.isclose(est, math.e, rtol=1e-5)


def test_generic_entry_point_matches_wrappers():
    """finite_difference with a scheme name matches the named wrapper."""
    assert finite_difference(math.sin, 0.4, 0.01, scheme="forward") == forward_difference(
        math.sin, 0.4, 0.01
    )


def test_scalar_returns_python_float():
    """Scalar output returns Python float."""
    assert isinstance(central_difference(lambda x: x**2, 1.0, 0.1), float)


@pytest.mark.parametrize("stepsize", [0.0, -0.1])
def test_non_positive_stepsize_raises(stepsize):
    """Stencil estimates of callables require h > 0."""
    with pytest.raises(ValueError, match=r"\[FiniteDifference\] stepsize must be positive"):
        central_difference(math.sin, 0.0, stepsize)


def test_unknown_scheme_raises():
    """Unknown scheme names raise ValueError."""
    with pytest.raises(ValueError):
        finite_difference(math.sin, 0.0, 0.1, scheme="sideways")
