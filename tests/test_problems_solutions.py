"""Tests for the computed worked solutions."""

from __future__ import annotations

import math

import pytest

from fdkit.problems import PROBLEMS, solve
from fdkit.problems.solutions import SOLVERS


def test_every_problem_has_a_solver():
    """Each catalogued problem can be solved."""
    assert set(SOLVERS) == {p.id for p in PROBLEMS}


def test_unknown_problem_raises():
    """Unknown ids raise KeyError."""
    with pytest.raises(KeyError):
        solve("sol0")


def test_problem_1_power_schemes():
    """x**3 at 2 with h=0.1."""
    sol = solve("sol1")
    assert sol["exact"] == 12.0
    assert sol["forward"] == pytest.approx(12.61)
    assert sol["backward"] == pytest.approx(11.41)
    assert sol["central"] == pytest.approx(12.01)
    assert sol["errors"]["backward"] == pytest.approx(-0.59)


def test_problem_2_sine_central():
    """Central difference of sin at pi/4 is within 0.01 percent."""
    sol = solve("sol2")
    assert sol["exact"] == pytest.approx(math.sqrt(2) / 2)
    assert sol["central"] == pytest.approx(0.7071, abs=1e-4)
    assert sol["percentage_error"] < 0.01


def test_problem_3_tabulated():
    """Central difference on the e**x table at 1.4."""
    sol = solve("sol3")
    assert sol["central"] == pytest.approx(4.08225)
    assert sol["reference"] == pytest.approx(4.0552, abs=1e-4)


def test_problem_4_forward_accuracy():
    """Forward errors shrink with h; the second derivative is near zero."""
    sol = solve("sol4")
    rows = sol["forward_study"]
    assert [row.step_size for row in rows] == [0.1, 0.01, 0.001]
    assert rows[0].estimate == pytest.approx(-0.979)
    assert rows[0].error == pytest.approx(0.021)
    assert abs(rows[2].error) < abs(rows[1].error) < abs(rows[0].error)
    assert abs(sol["second_central"]) < 1e-3


def test_problem_5_optimal_step():
    """Optimal central step for e**x at 1."""
    assert solve("sol5")["optimal_step"] == pytest.approx(8.4e-6, rel=1e-2)


def test_problem_6_richardson():
    """Richardson extrapolation improves on both central estimates."""
    sol = solve("sol6")
    assert sol["central_h"] == pytest.approx(0.50042, abs=1e-5)
    assert abs(sol["richardson"] - 0.5) < abs(sol["central_h_half"] - 0.5)
    assert sol["richardson"] == pytest.approx(0.5, abs=1e-6)


def test_problem_7_five_point():
    """Five-point beats three-point for f = x**2 e**x at 1."""
    sol = solve("sol7")
    assert sol["exact_first"] == pytest.approx(8.1548, abs=1e-4)
    assert abs(sol["central3"] - sol["exact_first"]) < 1e-3
    assert abs(sol["central5"] - sol["exact_first"]) < 1e-6
    assert abs(sol["second_central"] - sol["exact_second"]) < 1e-3


def test_problem_8_convergence_rates():
    """Forward converges linearly, central quadratically, for sqrt at 4."""
    sol = solve("sol8")
    assert sol["forward_order"] == pytest.approx(1.0, abs=0.1)
    assert sol["central_order"] == pytest.approx(2.0, abs=0.1)
    assert sol["forward_study"][0].error == pytest.approx(-0.0074, abs=1e-4)


def test_problem_9_noisy_data():
    """Direct, smoothed and polynomial-fit slopes at t=3."""
    sol = solve("sol9")
    assert sol["direct"] == pytest.approx(2.7)
    assert sol["smoothed"] == pytest.approx(2.65)
    assert sol["polyfit"] == pytest.approx(2.64, abs=1e-9)


def test_problem_10_roundoff():
    """Runge function: exact slope -0.64 at 0.5 and a small optimal step."""
    sol = solve("sol10")
    assert sol["exact"] == pytest.approx(-0.64)
    assert sol["central_at_zero"] == 0.0
    rows = sol["central_study"]
    assert rows[0].estimate == pytest.approx(-0.6338742, abs=1e-7)
    assert abs(rows[1].error) < 1e-5
    assert sol["optimal_step"] == pytest.approx(5.07e-6, rel=1e-2)
    assert sol["sqrt_epsilon"] == pytest.approx(1.49e-8, rel=1e-2)
