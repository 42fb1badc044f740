"""Finite-difference derivative estimates of an arbitrary callable.

The worked problems need more than the power-function calculator: sines,
logarithms and the Runge function, second derivatives and the five-point
central formula. All of them go through :func:`finite_difference`, which
contracts the stencil coefficients from :mod:`fdkit.finite.stencil` with
the function values on the stencil.

Examples:
--------
>>> import numpy as np
>>> from fdkit.finite.difference import central_difference
>>> bool(np.isclose(central_difference(np.sin, np.pi / 4, 0.01), np.cos(np.pi / 4), atol=1e-4))
True
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from fdkit.finite.stencil import difference_coefficients, validate_scheme

__all__ = [
    "finite_difference",
    "forward_difference",
    "backward_difference",
    "central_difference",
    "five_point_central_difference",
    "second_central_difference",
]


def finite_difference(
    function: Callable[[float], float],
    x0: float,
    stepsize: float,
    scheme: str = "central",
    order: int = 1,
) -> float:
    """Returns one finite-difference estimate of a derivative at ``x0``.

    Args:
        function: Scalar function of one float.
        x0: The point at which to evaluate the derivative.
        stepsize: The step size (h) between stencil points.
        scheme: Stencil name, see :data:`fdkit.finite.stencil.SCHEMES`.
        order: The order of the derivative to compute.

    Returns:
        The estimated derivative as a float.

    Raises:
        ValueError: If ``stepsize`` is not positive, or the scheme/order
            combination is not supported.
    """
    if stepsize <= 0:
        raise ValueError("[FiniteDifference] stepsize must be positive.")

    offsets = validate_scheme(scheme, order)
    coeffs = difference_coefficients(offsets, order, stepsize)
    values = np.array([function(x0 + k * stepsize) for k in offsets], dtype=float)
    return float(np.dot(coeffs, values))


def forward_difference(function, x0: float, stepsize: float) -> float:
    """First derivative from ``(f(x0 + h) - f(x0)) / h``."""
    return finite_difference(function, x0, stepsize, scheme="forward")


def backward_difference(function, x0: float, stepsize: float) -> float:
    """First derivative from ``(f(x0) - f(x0 - h)) / h``."""
    return finite_difference(function, x0, stepsize, scheme="backward")


def central_difference(function, x0: float, stepsize: float) -> float:
    """First derivative from ``(f(x0 + h) - f(x0 - h)) / (2h)``."""
    return finite_difference(function, x0, stepsize, scheme="central")


def five_point_central_difference(function, x0: float, stepsize: float) -> float:
    """First derivative from the fourth-order five-point central formula.

    ``(-f(x0 + 2h) + 8 f(x0 + h) - 8 f(x0 - h) + f(x0 - 2h)) / (12h)``
    """
    return finite_difference(function, x0, stepsize, scheme="central5")


def second_central_difference(function, x0: float, stepsize: float) -> float:
    """Second derivative from ``(f(x0 + h) - 2 f(x0) + f(x0 - h)) / h**2``."""
    return finite_difference(function, x0, stepsize, scheme="central3", order=2)
