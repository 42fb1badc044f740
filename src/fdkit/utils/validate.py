"""Validation utilities for fdkit."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "validate_uniform_grid",
]


def validate_uniform_grid(
    x: ArrayLike,
    y: ArrayLike,
    *,
    rtol: float = 1e-6,
    min_points: int = 3,
) -> tuple[NDArray[np.floating], NDArray[np.floating], float]:
    """Validates and converts tabulated ``x`` and ``y`` arrays into NumPy arrays.

    Requirements:
      - ``x`` and ``y`` are 1D with the same length.
      - ``x`` is strictly increasing and has at least ``min_points`` entries.
      - The spacing of ``x`` is uniform to relative tolerance ``rtol``.

    Args:
        x: 1D array-like of sample locations.
        y: 1D array-like of sample values.
        rtol: Relative tolerance on the spacing.
        min_points: Minimum number of samples.

    Returns:
        Tuple of (x_array, y_array, spacing).

    Raises:
        ValueError: If input arrays do not meet the required conditions.
    """
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)

    if x_arr.ndim != 1 or y_arr.ndim != 1:
        raise ValueError("x and y must be 1D.")
    if x_arr.shape[0] != y_arr.shape[0]:
        raise ValueError("x and y must have the same length.")
    if x_arr.shape[0] < min_points:
        raise ValueError(f"at least {min_points} samples are required.")

    steps = np.diff(x_arr)
    if not np.all(steps > 0):
        raise ValueError("x must be strictly increasing.")
    spacing = float(np.mean(steps))
    if not np.allclose(steps, spacing, rtol=rtol, atol=0.0):
        raise ValueError("x must be uniformly spaced.")

    return x_arr, y_arr, spacing
