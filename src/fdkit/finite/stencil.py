"""Stencil definitions and utilities for finite-difference derivative calculations."""

import math

import numpy as np
from numpy.typing import NDArray

__all__ = [
    "SCHEMES",
    "difference_coefficients",
    "truncation_order",
    "validate_scheme",
    "TRUNCATION_ORDER",
]


#: Integer offsets of the supported stencils, keyed by scheme name.
SCHEMES = {
    "forward": (0, 1),
    "backward": (-1, 0),
    "central": (-1, 1),
    "central3": (-1, 0, 1),
    "central5": (-2, -1, 0, 1, 2),
}


def difference_coefficients(
    offsets,
    order: int,
    stepsize: float = 1.0,
) -> NDArray[np.float64]:
    """Computes finite difference coefficients for given offsets and derivative order.

    Solves the Taylor moment system so that ``sum(c_i * f(x0 + k_i * h))``
    reproduces the derivative of the requested order. Works for central as
    well as one-sided offsets.

    Args:
        offsets: Integer offsets of the stencil points, in units of ``stepsize``.
        order: The order of the derivative to approximate.
        stepsize: The stepsize used in the finite difference calculation.

    Returns:
        An array of finite difference coefficients, one per offset.
    """
    k = np.asarray(offsets, dtype=float)
    n = k.size

    matrix = np.zeros((n, n), dtype=float)
    b = np.zeros(n, dtype=float)

    # Match Taylor expansion up to degree n-1
    for row in range(n):
        matrix[row, :] = k**row / math.factorial(row)
    b[order] = 1.0

    return np.linalg.solve(matrix, b) / (stepsize**order)


def truncation_order(
    offsets,
    order: int,
    tol: float = 1e-12,
) -> int:
    """Detects the leading truncation order of a stencil from its coefficient moments.

    Args:
        offsets: Integer offsets of the stencil points.
        order: The derivative order the stencil approximates.
        tol: Numerical tolerance used to decide that a moment is non-zero.

    Returns:
        The power ``p`` of the leading error term ``O(h**p)``.
    """
    k = np.asarray(offsets, dtype=float)
    coeffs = difference_coefficients(k, order, 1.0)
    max_r = 40

    for r in range(order + 1, max_r + 1):
        moment = float(np.dot(coeffs, k**r))
        if abs(moment) > tol:
            return r - order
    raise RuntimeError("Could not detect truncation order.")


def validate_scheme(
    scheme: str,
    order: int,
) -> tuple[int, ...]:
    """Validates that the (scheme, order) combination is supported.

    Args:
        scheme: Name of the stencil, one of :data:`SCHEMES`.
        order: The order of the derivative to compute.

    Returns:
        The stencil offsets for ``scheme``.

    Raises:
        ValueError: If the scheme is unknown or cannot resolve ``order``.
    """
    if scheme not in SCHEMES:
        raise ValueError(
            f"[FiniteDifference] Unknown scheme: {scheme!r}. "
            f"Must be one of {sorted(SCHEMES)}."
        )
    offsets = SCHEMES[scheme]
    if order < 1 or order >= len(offsets):
        raise ValueError(
            f"[FiniteDifference] {scheme} stencil with {len(offsets)} points "
            f"cannot compute derivative order {order}."
        )
    return offsets


def _build_truncation_orders() -> dict[tuple[str, int], int]:
    out: dict[tuple[str, int], int] = {}
    for name, offsets in SCHEMES.items():
        for m in range(1, len(offsets)):
            out[(name, m)] = truncation_order(offsets, m)
    return out


#: Leading error order for every supported (scheme, order) combination.
TRUNCATION_ORDER = _build_truncation_orders()
