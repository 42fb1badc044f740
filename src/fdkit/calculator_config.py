"""Configuration for the interactive power-function calculator.

Holds the values a fresh calculator starts from and how many decimals its
report shows.
"""

from __future__ import annotations


class CalculatorConfig:
    """Configuration for the interactive power-function calculator."""

    def __init__(
        self,
        power: float = 2.0,
        point: float = 2.0,
        step_size: float = 0.01,
        digits: int = 6,
    ):
        """Initialize configuration.

        Args:
            power:
                Initial exponent ``n`` of ``f(x) = x**n``.

            point:
                Initial evaluation point ``x``.

            step_size:
                Initial step size ``h``. Expected to be positive; the
                calculator does not enforce it.

            digits:
                Number of decimals shown for every value and error in
                :func:`fdkit.report.format_result`.
        """
        if digits < 0:
            raise ValueError("digits must be non-negative.")
        self.power = float(power)
        self.point = float(point)
        self.step_size = float(step_size)
        self.digits = int(digits)

    def __repr__(self) -> str:
        return (
            f"CalculatorConfig(power={self.power!r}, point={self.point!r}, "
            f"step_size={self.step_size!r}, digits={self.digits!r})"
        )
