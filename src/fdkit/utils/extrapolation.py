"""Extrapolation methods for numerical approximations."""

from __future__ import annotations

from collections.abc import Callable
from typing import Sequence

from fdkit.finite.difference import central_difference

__all__ = [
    "richardson_extrapolate",
    "richardson_central",
]


def richardson_extrapolate(
        base_values: Sequence[float],
        p: int,
        r: float = 2.0,
) -> float:
    """Computes Richardson extrapolation on a sequence of approximations.

    Richardson extrapolation improves the accuracy of a sequence of
    numerical approximations that converge with a known leading-order error
    term. Given a sequence of approximations computed with decreasing step sizes,
    this method combines them to eliminate the leading error term, yielding
    a more accurate estimate of the true value.

    For two central-difference estimates at ``h`` and ``h/2`` this reduces to
    ``D(h/2) + (D(h/2) - D(h)) / 3``.

    Args:
        base_values:
            Sequence of approximations at different step sizes.
            The step sizes are assumed to decrease by a factor of `r`
            between successive entries.
        p:
            The order of the leading error term in the approximations.
        r:
            The step-size reduction factor between successive entries
            (default is 2.0).

    Returns:
        The extrapolated value with improved accuracy.

    Raises:
        ValueError: If `base_values` has fewer than two entries.
    """
    n = len(base_values)
    if n < 2:
        raise ValueError("richardson_extrapolate requires at least two base values.")

    vals = [float(v) for v in base_values]

    for j in range(1, n):
        factor = r ** (p * j)
        for k in range(n - 1, j - 1, -1):
            vals[k] = (factor * vals[k] - vals[k - 1]) / (factor - 1.0)

    return vals[-1]


def richardson_central(
    function: Callable[[float], float],
    x0: float,
    stepsize: float,
    levels: int = 2,
    r: float = 2.0,
) -> tuple[float, list[float]]:
    """Richardson-extrapolated central difference.

    Computes central differences at ``h, h/r, ..., h/r**(levels-1)`` and
    extrapolates them with ``p=2``.

    Args:
        function: Scalar function of one float.
        x0: The point at which to evaluate the derivative.
        stepsize: The initial step size h.
        levels: Number of central-difference estimates to combine.
        r: The step-size reduction factor between successive levels.

    Returns:
        The extrapolated estimate and the list of base estimates it was built from.
    """
    if levels < 2:
        raise ValueError("richardson_central requires levels >= 2.")

    base_values: list[float] = []
    h = float(stepsize)
    for _ in range(levels):
        base_values.append(central_difference(function, x0, h))
        h /= r

    return richardson_extrapolate(base_values, p=2, r=r), base_values

