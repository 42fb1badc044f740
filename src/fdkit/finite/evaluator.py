"""Forward, backward and central difference estimates for ``f(x) = x**n``.

This is the engine behind the interactive calculator. One call evaluates the
monomial around ``x`` and returns the analytic derivative together with the
three two-point estimates.

Examples:
--------
>>> from fdkit.finite.evaluator import evaluate
>>> est = evaluate(3, 2.0, 0.1)
>>> round(est.forward, 2), round(est.backward, 2), round(est.central, 2)
(12.61, 11.41, 12.01)
>>> est.exact
12.0
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from fdkit.logger import fdkit_logger

__all__ = [
    "DifferenceEstimates",
    "evaluate",
    "power_function",
]


@dataclass(frozen=True)
class DifferenceEstimates:
    """Exact derivative and the three finite-difference estimates at one point.

    Attributes:
        exact: Analytic derivative ``n * x**(n - 1)``.
        forward: Forward difference ``(f(x + h) - f(x)) / h``.
        backward: Backward difference ``(f(x) - f(x - h)) / h``.
        central: Central difference ``(f(x + h) - f(x - h)) / (2h)``.
    """

    exact: float
    forward: float
    backward: float
    central: float

    @property
    def forward_error(self) -> float:
        """Signed error of the forward estimate."""
        return self.forward - self.exact

    @property
    def backward_error(self) -> float:
        """Signed error of the backward estimate."""
        return self.backward - self.exact

    @property
    def central_error(self) -> float:
        """Signed error of the central estimate."""
        return self.central - self.exact

    def errors(self) -> dict[str, float]:
        """Returns the signed error ``approximation - exact`` keyed by scheme."""
        return {
            "forward": self.forward_error,
            "backward": self.backward_error,
            "central": self.central_error,
        }


def _power(base: np.float64, exponent: np.float64) -> np.float64:
    # Math.pow(+-1, +-inf) is nan.
    if np.isinf(exponent) and np.abs(base) == 1:
        return np.float64(np.nan)
    return np.power(base, exponent)


def power_function(n: float):
    """Returns ``f(v) = v**n`` with IEEE power semantics.

    Negative bases with fractional exponents give ``nan`` and ``0**(-k)``
    gives ``inf``, instead of the complex results or exceptions that the
    builtin ``**`` operator produces for plain Python floats. ``(+-1)**inf``
    gives ``nan``, as ``Math.pow`` does.
    """
    exponent = np.float64(n)

    def f(v):
        return _power(np.float64(v), exponent)

    return f


def evaluate(n: float, x: float, h: float) -> DifferenceEstimates:
    """Evaluates the exact derivative and three difference estimates of ``x**n``.

    The call never raises. A zero step, a negative base with a fractional
    power, or overflow show up as ``nan`` or ``inf`` in the affected fields.

    Args:
        n: Exponent of the monomial.
        x: Point at which the derivative is evaluated.
        h: Step size. Expected to be positive, but not validated.

    Returns:
        A :class:`DifferenceEstimates` snapshot.
    """
    if not h > 0:
        fdkit_logger.warning(
            "[evaluate] Non-positive step size h=%r; estimates may be inf or nan.",
            h,
        )

    f = power_function(n)
    n = np.float64(n)
    x = np.float64(x)
    h = np.float64(h)

    with np.errstate(all="ignore"):
        exact = n * _power(x, n - 1.0)
        forward = (f(x + h) - f(x)) / h
        backward = (f(x) - f(x - h)) / h
        central = (f(x + h) - f(x - h)) / (2.0 * h)

    return DifferenceEstimates(
        exact=float(exact),
        forward=float(forward),
        backward=float(backward),
        central=float(central),
    )
