"""State of the interactive ``f(x) = x**n`` calculator.

The calculator holds two independent immutable snapshots: the current
inputs and the result of the last calculation (``None`` until the first
one). Every user action returns a new :class:`CalculatorSession` rather
than mutating the old one.

Examples:
--------
>>> from fdkit.calculator import CalculatorSession
>>> session = CalculatorSession.from_config()
>>> session.result is None
True
>>> session = session.update_input("power", "3").update_input("step_size", "0.1")
>>> session = session.calculate()
>>> round(session.result.central, 2)
12.01
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from fdkit.calculator_config import CalculatorConfig
from fdkit.finite.evaluator import DifferenceEstimates, evaluate

__all__ = [
    "CalculatorInput",
    "CalculatorResult",
    "CalculatorSession",
    "INPUT_FIELDS",
    "coerce_number",
]

#: Names of the editable calculator fields.
INPUT_FIELDS = ("power", "point", "step_size")

_NUMERIC_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def coerce_number(value: Any) -> float:
    """Parses user input the way ``parseFloat(value) || 0`` does.

    Leading whitespace is skipped and the longest numeric prefix is parsed,
    so ``"2.5abc"`` gives ``2.5``. Anything without a numeric prefix, and
    any value that parses to ``nan`` or zero, gives ``0.0``.

    Args:
        value: Raw field content, usually a string.

    Returns:
        The parsed number, never ``nan``.
    """
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _NUMERIC_PREFIX.match(str(value).lstrip())
        if match is None:
            return 0.0
        text = match.group(0)
        number = float(text.replace("Infinity", "inf"))
    if math.isnan(number) or number == 0:
        return 0.0
    return number


@dataclass(frozen=True)
class CalculatorInput:
    """Inputs of one calculation: exponent, point and step size."""

    power: float = 2.0
    point: float = 2.0
    step_size: float = 0.01

    @classmethod
    def from_config(cls, config: Optional[CalculatorConfig] = None) -> CalculatorInput:
        config = config or CalculatorConfig()
        return cls(power=config.power, point=config.point, step_size=config.step_size)

    def update(self, name: str, value: Any) -> CalculatorInput:
        """Returns a copy with field ``name`` set to the coerced ``value``.

        Raises:
            ValueError: If ``name`` is not one of :data:`INPUT_FIELDS`.
        """
        if name not in INPUT_FIELDS:
            raise ValueError(
                f"[Calculator] Unknown field {name!r}; expected one of {list(INPUT_FIELDS)}."
            )
        return replace(self, **{name: coerce_number(value)})


@dataclass(frozen=True)
class CalculatorResult:
    """Snapshot produced by one calculation.

    Attributes:
        exact: Analytic derivative ``n * x**(n - 1)``.
        forward: Forward-difference estimate.
        backward: Backward-difference estimate.
        central: Central-difference estimate.
        n: Exponent the result was computed for.
        x: Point the result was computed at.
    """

    exact: float
    forward: float
    backward: float
    central: float
    n: float
    x: float

    @classmethod
    def from_estimates(cls, estimates: DifferenceEstimates, n: float, x: float) -> CalculatorResult:
        return cls(
            exact=estimates.exact,
            forward=estimates.forward,
            backward=estimates.backward,
            central=estimates.central,
            n=n,
            x=x,
        )

    def error(self, scheme: str) -> float:
        """Signed error ``approximation - exact`` of ``scheme``."""
        if scheme not in ("forward", "backward", "central"):
            raise ValueError(f"[Calculator] Unknown scheme {scheme!r}.")
        return getattr(self, scheme) - self.exact


@dataclass(frozen=True)
class CalculatorSession:
    """Current inputs plus the result of the last calculation."""

    inputs: CalculatorInput = field(default_factory=CalculatorInput)
    result: Optional[CalculatorResult] = None

    @classmethod
    def from_config(cls, config: Optional[CalculatorConfig] = None) -> CalculatorSession:
        return cls(inputs=CalculatorInput.from_config(config))

    def update_input(self, name: str, value: Any) -> CalculatorSession:
        """Returns a session with one input edited; the last result is kept."""
        return replace(self, inputs=self.inputs.update(name, value))

    def calculate(self) -> CalculatorSession:
        """Runs the evaluator on the current inputs and replaces the result."""
        n, x, h = self.inputs.power, self.inputs.point, self.inputs.step_size
        estimates = evaluate(n, x, h)
        return replace(self, result=CalculatorResult.from_estimates(estimates, n, x))
