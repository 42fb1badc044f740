"""Worked solutions of the ten problems, computed with the fdkit engines.

Each solver returns a plain ``dict`` of named results so that a page can
render whichever numbers it needs. :func:`solve` dispatches on the problem
identifier.
"""

from __future__ import annotations

import math
from collections.abc import Callable

import numpy as np

from fdkit.analysis.convergence import observed_order, step_size_study
from fdkit.finite.difference import (
    central_difference,
    five_point_central_difference,
    forward_difference,
    second_central_difference,
)
from fdkit.finite.evaluator import evaluate
from fdkit.logger import fdkit_logger
from fdkit.problems.catalog import EXPERIMENT_DATA, TEMPERATURE_DATA, get_problem
from fdkit.tabulated_model.one_d import TabulatedSeries
from fdkit.utils.extrapolation import richardson_central
from fdkit.utils.numerics import optimal_central_step, percentage_error

__all__ = ["SOLVERS", "solve"]


def _solve_power_schemes() -> dict:
    est = evaluate(3, 2.0, 0.1)
    return {
        "exact": est.exact,
        "forward": est.forward,
        "backward": est.backward,
        "central": est.central,
        "errors": est.errors(),
    }


def _solve_sine_central() -> dict:
    x0 = math.pi / 4
    approx = central_difference(math.sin, x0, 0.01)
    exact = math.cos(x0)
    return {
        "central": approx,
        "exact": exact,
        "percentage_error": percentage_error(approx, exact),
    }


def _solve_tabulated() -> dict:
    series = TabulatedSeries(*EXPERIMENT_DATA)
    return {
        "central": series.central_derivative_at(1.4),
        "reference": math.exp(1.4),
    }


def _quartic(x):
    return x**4 - 2 * x**3 + x


def _solve_forward_accuracy() -> dict:
    rows = step_size_study(_quartic, 1.0, -1.0, (0.1, 0.01, 0.001), scheme="forward")
    return {
        "exact_first": -1.0,
        "exact_second": 0.0,
        "forward_study": rows,
        "second_central": second_central_difference(_quartic, 1.0, 0.01),
    }


def _solve_optimal_step() -> dict:
    e = math.e
    return {"optimal_step": optimal_central_step(e, e)}


def _solve_richardson() -> dict:
    extrapolated, (coarse, fine) = richardson_central(math.log, 2.0, 0.1, levels=2)
    return {
        "exact": 0.5,
        "central_h": coarse,
        "central_h_half": fine,
        "richardson": extrapolated,
    }


def _x2_exp(x):
    return x**2 * math.exp(x)


def _solve_five_point() -> dict:
    h = 0.01
    return {
        "exact_first": 3 * math.e,
        "exact_second": 7 * math.e,
        "central3": central_difference(_x2_exp, 1.0, h),
        "central5": five_point_central_difference(_x2_exp, 1.0, h),
        "second_central": second_central_difference(_x2_exp, 1.0, h),
    }


def _solve_sqrt_convergence() -> dict:
    steps = (0.5, 0.1, 0.01)
    forward = step_size_study(math.sqrt, 4.0, 0.25, steps, scheme="forward")
    central = step_size_study(math.sqrt, 4.0, 0.25, steps, scheme="central")
    return {
        "forward_study": forward,
        "central_study": central,
        "forward_order": observed_order(steps, [row.error for row in forward]),
        "central_order": observed_order(steps, [row.error for row in central]),
    }


def _solve_noisy_data() -> dict:
    series = TabulatedSeries(*TEMPERATURE_DATA)
    return {
        "direct": series.central_derivative_at(3.0),
        "smoothed": series.smoothed(3).central_derivative_at(3.0),
        "polyfit": series.polyfit_derivative_at(3.0, degree=2, half_width=2),
    }


def _runge(x):
    return 1.0 / (1.0 + x**2)


def _solve_roundoff() -> dict:
    x0 = 0.5
    exact = -2 * x0 / (1 + x0**2) ** 2
    third = 24 * x0 * (1 - x0**2) / (1 + x0**2) ** 4
    return {
        "exact": exact,
        "central_at_zero": central_difference(_runge, 0.0, 0.1),
        "central_study": step_size_study(
            _runge, x0, exact, (0.1, 1e-3, 1e-8, 1e-12), scheme="central"
        ),
        "optimal_step": optimal_central_step(_runge(x0), third),
        "sqrt_epsilon": float(np.sqrt(np.finfo(float).eps)),
    }


#: Solver of each problem, keyed by problem identifier.
SOLVERS: dict[str, Callable[[], dict]] = {
    "sol1": _solve_power_schemes,
    "sol2": _solve_sine_central,
    "sol3": _solve_tabulated,
    "sol4": _solve_forward_accuracy,
    "sol5": _solve_optimal_step,
    "sol6": _solve_richardson,
    "sol7": _solve_five_point,
    "sol8": _solve_sqrt_convergence,
    "sol9": _solve_noisy_data,
    "sol10": _solve_roundoff,
}


def solve(problem_id: str) -> dict:
    """Computes the worked solution of one problem.

    Args:
        problem_id: Identifier such as ``"sol1"``.

    Returns:
        Named results of the solution.

    Raises:
        KeyError: If ``problem_id`` is unknown.
    """
    problem = get_problem(problem_id)
    fdkit_logger.info("Solving %s (%s).", problem.title, problem.difficulty)
    return SOLVERS[problem.id]()
