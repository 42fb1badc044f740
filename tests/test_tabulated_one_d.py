"""Tests for derivatives of tabulated 1D data."""

from __future__ import annotations

import numpy as np
import pytest

from fdkit.problems.catalog import EXPERIMENT_DATA, TEMPERATURE_DATA
from fdkit.tabulated_model import TabulatedSeries


@pytest.fixture
def temperature():
    """Noisy temperature readings, hourly from t=0 to t=6."""
    return TabulatedSeries(*TEMPERATURE_DATA)


def test_central_derivative_on_experiment_data():
    """Central difference at 1.4 uses the neighbours at 1.2 and 1.6."""
    series = TabulatedSeries(*EXPERIMENT_DATA)
    assert series.central_derivative_at(1.4) == pytest.approx((4.9530 - 3.3201) / 0.4)


def test_direct_central_on_temperature(temperature):
    """dT/dt at t=3 from T(4) and T(2)."""
    assert temperature.central_derivative_at(3.0) == pytest.approx(2.7)


def test_smoothed_series_drops_end_points(temperature):
    """A 3-point moving average keeps the interior nodes 1..5."""
    smooth = temperature.smoothed(3)
    assert len(smooth) == 5
    np.testing.assert_allclose(smooth.x, [1.0, 2.0, 3.0, 4.0, 5.0])
    assert smooth.central_derivative_at(3.0) == pytest.approx(2.65)


def test_polyfit_derivative_on_temperature(temperature):
    """A quadratic through t=1..5 has slope 2.64 at t=3."""
    assert temperature.polyfit_derivative_at(3.0) == pytest.approx(2.64, abs=1e-9)


def test_polyfit_recovers_exact_quadratic():
    """On noise-free quadratic data the fit reproduces the derivative."""
    x = np.linspace(0.0, 2.0, 9)
    series = TabulatedSeries(x, 3 * x**2 - x + 1)
    assert series.polyfit_derivative_at(1.0, degree=2, half_width=3) == pytest.approx(5.0)


def test_polyfit_near_edge_uses_available_nodes():
    """At the first interior node the window is clipped to the grid."""
    x = np.linspace(0.0, 1.0, 6)
    series = TabulatedSeries(x, 2 * x + 1)
    assert series.polyfit_derivative_at(0.2, degree=1, half_width=2) == pytest.approx(2.0)


def test_point_off_grid_raises(temperature):
    """Only grid nodes can be differentiated."""
    with pytest.raises(ValueError, match="not a grid node"):
        temperature.central_derivative_at(2.5)


def test_end_point_has_no_central_derivative(temperature):
    """End points lack a neighbour on one side."""
    with pytest.raises(ValueError):
        temperature.central_derivative_at(0.0)


def test_polyfit_with_too_few_nodes_raises(temperature):
    """A quadratic needs three nodes."""
    with pytest.raises(ValueError):
        temperature.polyfit_derivative_at(3.0, degree=2, half_width=0)
