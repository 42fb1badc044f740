"""Unit tests for fdkit.finite.stencil."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.testing import assert_allclose

from fdkit.finite.stencil import (
    SCHEMES,
    TRUNCATION_ORDER,
    difference_coefficients,
    truncation_order,
    validate_scheme,
)


def test_forward_and_backward_coefficients():
    """Two-point one-sided stencils are [-1, 1] / h."""
    assert_allclose(difference_coefficients(SCHEMES["forward"], 1), [-1.0, 1.0], atol=1e-12)
    assert_allclose(difference_coefficients(SCHEMES["backward"], 1), [-1.0, 1.0], atol=1e-12)


def test_central_coefficients_scale_with_stepsize():
    """Central first-derivative coefficients are [-1, 1] / (2h)."""
    coeffs = difference_coefficients(SCHEMES["central"], 1, stepsize=0.1)
    assert_allclose(coeffs, [-5.0, 5.0], atol=1e-10)


def test_five_point_coefficients():
    """The five-point first-derivative stencil is [1, -8, 0, 8, -1] / 12."""
    coeffs = difference_coefficients(SCHEMES["central5"], 1)
    assert_allclose(coeffs, np.array([1.0, -8.0, 0.0, 8.0, -1.0]) / 12.0, atol=1e-12)


def test_second_derivative_coefficients():
    """Three-point second-derivative stencil is [1, -2, 1] / h**2."""
    coeffs = difference_coefficients(SCHEMES["central3"], 2, stepsize=0.5)
    assert_allclose(coeffs, np.array([1.0, -2.0, 1.0]) / 0.25, atol=1e-12)


@pytest.mark.parametrize(
    "key, expected",
    [
        (("forward", 1), 1),
        (("backward", 1), 1),
        (("central", 1), 2),
        (("central3", 2), 2),
        (("central5", 1), 4),
        (("central5", 2), 4),
    ],
)
def test_truncation_orders(key, expected):
    """Leading error orders are detected from the coefficient moments."""
    assert TRUNCATION_ORDER[key] == expected
    assert truncation_order(SCHEMES[key[0]], key[1]) == expected


def test_validate_scheme_returns_offsets():
    """A valid combination returns its offsets."""
    assert validate_scheme("central5", 2) == (-2, -1, 0, 1, 2)


def test_validate_scheme_rejects_unknown_scheme():
    """Unknown scheme names raise ValueError."""
    with pytest.raises(ValueError, match="Unknown scheme"):
        validate_scheme("upwind", 1)


@pytest.mark.parametrize("scheme, order", [("forward", 2), ("central", 2), ("central3", 0)])
def test_validate_scheme_rejects_unsupported_order(scheme, order):
    """A stencil cannot resolve orders at or above its point count, or below 1."""
    with pytest.raises(ValueError):
        validate_scheme(scheme, order)
