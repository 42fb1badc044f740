"""Step-size studies and observed order of accuracy."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

import numpy as np

from fdkit.finite.difference import finite_difference
from fdkit.finite.evaluator import evaluate
from fdkit.finite.stencil import TRUNCATION_ORDER
from fdkit.logger import fdkit_logger

__all__ = [
    "StepStudyRow",
    "step_size_study",
    "observed_order",
    "power_convergence",
]


@dataclass(frozen=True)
class StepStudyRow:
    """One row of a step-size study.

    Attributes:
        step_size: Step size h.
        estimate: Finite-difference estimate at this step size.
        error: Signed error ``estimate - exact``.
        scaled_error: ``|error| / h**p`` with ``p`` the scheme's truncation
            order. Roughly constant while truncation error dominates.
    """

    step_size: float
    estimate: float
    error: float
    scaled_error: float


def step_size_study(
    function: Callable[[float], float],
    x0: float,
    exact: float,
    step_sizes: Sequence[float],
    scheme: str = "central",
    order: int = 1,
) -> list[StepStudyRow]:
    """Evaluates one scheme over a sequence of step sizes.

    Args:
        function: Scalar function of one float.
        x0: The point at which to evaluate the derivative.
        exact: The exact derivative at ``x0``.
        step_sizes: Step sizes to try.
        scheme: Stencil name, see :data:`fdkit.finite.stencil.SCHEMES`.
        order: The order of the derivative to compute.

    Returns:
        One :class:`StepStudyRow` per step size, in input order.
    """
    p = TRUNCATION_ORDER.get((scheme, order))
    if p is None:
        raise ValueError(f"[Convergence] Unsupported scheme/order: {(scheme, order)}.")

    rows = []
    for h in step_sizes:
        est = finite_difference(function, x0, h, scheme=scheme, order=order)
        err = est - exact
        rows.append(StepStudyRow(float(h), est, err, abs(err) / h**p))
    return rows


def observed_order(
    step_sizes: Sequence[float],
    errors: Sequence[float],
) -> float:
    """Estimates the order ``p`` in ``|error| ~ C h**p`` by a log-log fit.

    Zero and non-finite errors are skipped.

    Args:
        step_sizes: Step sizes.
        errors: Errors at those step sizes (sign is ignored).

    Returns:
        The least-squares slope of ``log|error|`` against ``log h``.

    Raises:
        ValueError: If fewer than two usable points remain.
    """
    h = np.asarray(step_sizes, dtype=float)
    e = np.abs(np.asarray(errors, dtype=float))
    if h.shape != e.shape:
        raise ValueError("step_sizes and errors must have the same length.")

    mask = np.isfinite(e) & (e > 0) & (h > 0)
    if np.count_nonzero(mask) < 2:
        raise ValueError("observed_order needs at least two non-zero finite errors.")
    if np.count_nonzero(mask) < h.size:
        fdkit_logger.info(
            "observed_order skipped %d of %d points with zero or non-finite error.",
            h.size - np.count_nonzero(mask),
            h.size,
        )

    slope, _ = np.polyfit(np.log(h[mask]), np.log(e[mask]), 1)
    return float(slope)


def power_convergence(
    n: float,
    x: float,
    step_sizes: Sequence[float],
) -> dict[str, float]:
    """Observed order of the forward, backward and central estimates of ``x**n``.

    Args:
        n: Exponent of the monomial.
        x: Point at which the derivative is evaluated.
        step_sizes: Step sizes to sweep.

    Returns:
        Observed order keyed by scheme name.
    """
    estimates = [evaluate(n, x, h) for h in step_sizes]
    return {
        scheme: observed_order(step_sizes, [est.errors()[scheme] for est in estimates])
        for scheme in ("forward", "backward", "central")
    }
