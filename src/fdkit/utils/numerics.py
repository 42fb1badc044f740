"""Numerical utilities."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from fdkit.logger import fdkit_logger

__all__ = [
    "MACHINE_EPSILON",
    "signed_error",
    "relative_error",
    "percentage_error",
    "central_total_error",
    "optimal_central_step",
    "moving_average",
]

#: Rounded double-precision machine epsilon used in the round-off model.
MACHINE_EPSILON = 1e-16


def signed_error(approx: float, exact: float) -> float:
    """Returns ``approx - exact``."""
    return approx - exact


def relative_error(approx: float, exact: float) -> float:
    """Computes ``|approx - exact| / |exact|``.

    Returns ``nan`` when ``exact`` is zero, since the relative error is
    undefined there.
    """
    if exact == 0:
        return math.nan
    return abs(approx - exact) / abs(exact)


def percentage_error(approx: float, exact: float) -> float:
    """Relative error expressed in percent."""
    return 100.0 * relative_error(approx, exact)


def central_total_error(
    stepsize: float,
    f_value: float,
    third_derivative: float,
    eps: float = MACHINE_EPSILON,
) -> float:
    """Model of the total error of a central difference.

    Truncation ``h**2 |f'''| / 6`` plus round-off ``2 eps |f| / h``.

    Args:
        stepsize: Step size h.
        f_value: Function value at the evaluation point.
        third_derivative: Third derivative at the evaluation point.
        eps: Relative round-off error of one function evaluation.

    Returns:
        The modelled total error.
    """
    truncation = stepsize**2 * abs(third_derivative) / 6.0
    roundoff = 2.0 * eps * abs(f_value) / stepsize
    return truncation + roundoff


def optimal_central_step(
    f_value: float,
    third_derivative: float,
    eps: float = MACHINE_EPSILON,
) -> float:
    """Step size minimising :func:`central_total_error`.

    Setting the derivative of the error model to zero gives
    ``h**3 = 6 eps |f| / |f'''|``.

    Args:
        f_value: Function value at the evaluation point.
        third_derivative: Third derivative at the evaluation point.
        eps: Relative round-off error of one function evaluation.

    Returns:
        The optimal step size.

    Raises:
        ValueError: If ``third_derivative`` is zero, in which case the
            truncation term vanishes and no finite optimum exists.
    """
    if third_derivative == 0:
        raise ValueError("optimal_central_step requires a non-zero third derivative.")
    if f_value == 0:
        fdkit_logger.warning(
            "optimal_central_step called with f_value=0; round-off term vanishes."
        )
    return (6.0 * eps * abs(f_value) / abs(third_derivative)) ** (1.0 / 3.0)


def moving_average(values: ArrayLike | Sequence[float], window: int = 3) -> NDArray[np.float64]:
    """Centred moving average in ``valid`` mode.

    The output has ``len(values) - window + 1`` entries; entry ``i`` is the
    mean of ``values[i:i + window]``.

    Args:
        values: 1D sequence of samples.
        window: Odd number of samples per average.

    Returns:
        The smoothed samples.
    """
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 1:
        raise ValueError("values must be 1D.")
    if window < 1 or window % 2 == 0:
        raise ValueError("window must be a positive odd integer.")
    if window > arr.size:
        raise ValueError("window must not exceed the number of samples.")
    kernel = np.full(window, 1.0 / window)
    return np.convolve(arr, kernel, mode="valid")
