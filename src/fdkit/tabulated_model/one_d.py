"""Derivatives of uniformly sampled 1D data.

Experimental data comes as a table rather than a callable, so the stencil
has to sit on the sample grid. :class:`TabulatedSeries` offers three ways
to estimate ``dy/dx`` at a grid node:

* a direct central difference between the two neighbours,
* the same after a centred moving average (noise reduction),
* the slope of a local least-squares polynomial.
"""


from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from fdkit.utils.numerics import moving_average
from fdkit.utils.validate import validate_uniform_grid

__all__ = ["TabulatedSeries"]


class TabulatedSeries:
    """Uniformly spaced samples ``y(x)`` of a scalar function.

    Attributes:
        x: Sample locations, strictly increasing and uniformly spaced.
        y: Sample values.
        spacing: Distance between neighbouring samples.

    Example:
        >>> from fdkit.tabulated_model import TabulatedSeries
        >>> series = TabulatedSeries([1.0, 1.2, 1.4, 1.6, 1.8],
        ...                          [2.7183, 3.3201, 4.0552, 4.9530, 6.0496])
        >>> round(series.central_derivative_at(1.4), 3)
        4.082
    """

    def __init__(self, x: ArrayLike, y: ArrayLike, *, rtol: float = 1e-6):
        """Initialises the series.

        Args:
            x: 1D sample locations.
            y: 1D sample values, same length as ``x``.
            rtol: Relative tolerance used when checking uniform spacing and
                when matching requested points to grid nodes.
        """
        self.x, self.y, self.spacing = validate_uniform_grid(x, y, rtol=rtol)
        self.rtol = rtol

    def __len__(self) -> int:
        return self.x.shape[0]

    def index_of(self, x0: float) -> int:
        """Returns the index of the grid node at ``x0``.

        Raises:
            ValueError: If ``x0`` is not a grid node.
        """
        idx = int(np.argmin(np.abs(self.x - x0)))
        if abs(self.x[idx] - x0) > self.rtol * self.spacing:
            raise ValueError(f"[TabulatedSeries] x0={x0!r} is not a grid node.")
        return idx

    def central_derivative_at(self, x0: float) -> float:
        """Central difference ``(y[i+1] - y[i-1]) / (2 * spacing)`` at node ``x0``.

        Raises:
            ValueError: If ``x0`` is not an interior grid node.
        """
        i = self.index_of(x0)
        if i == 0 or i == len(self) - 1:
            raise ValueError(
                f"[TabulatedSeries] x0={x0!r} has no neighbour on both sides."
            )
        return float((self.y[i + 1] - self.y[i - 1]) / (2.0 * self.spacing))

    def smoothed(self, window: int = 3) -> TabulatedSeries:
        """Returns the moving-average series on the interior nodes.

        The first and last ``window // 2`` nodes are dropped.
        """
        half = window // 2
        y_smooth = moving_average(self.y, window)
        return TabulatedSeries(self.x[half:len(self) - half], y_smooth, rtol=self.rtol)

    def polyfit_derivative_at(
        self,
        x0: float,
        degree: int = 2,
        half_width: int = 2,
    ) -> float:
        """Slope at ``x0`` of a least-squares polynomial through nearby nodes.

        The polynomial is fitted in powers of ``(x - x0)`` to the nodes within
        ``half_width`` samples of ``x0``, so its derivative at ``x0`` is the
        linear coefficient.

        Args:
            x0: Grid node at which the derivative is wanted.
            degree: Polynomial degree.
            half_width: Number of nodes used on each side of ``x0``.

        Returns:
            The estimated derivative.

        Raises:
            ValueError: If fewer than ``degree + 1`` nodes are available.
        """
        if degree < 1:
            raise ValueError("degree must be at least 1.")
        i = self.index_of(x0)
        lo = max(0, i - half_width)
        hi = min(len(self), i + half_width + 1)
        if hi - lo < degree + 1:
            raise ValueError(
                f"[TabulatedSeries] {hi - lo} nodes are too few for a degree-{degree} fit."
            )
        u = self.x[lo:hi] - self.x[i]
        coeffs = np.polyfit(u, self.y[lo:hi], degree)
        return float(coeffs[-2])
