"""Text rendering of calculator results.

Numbers are written the way a browser shows them: ``to_fixed`` follows
``Number.prototype.toFixed`` and ``format_number`` follows ``String(number)``
closely enough for the calculator output.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

import numpy as np

from fdkit.calculator import CalculatorResult, CalculatorSession
from fdkit.calculator_config import CalculatorConfig

__all__ = [
    "SCHEME_LABELS",
    "format_number",
    "format_result",
    "format_session",
    "to_fixed",
]

#: Display label of each approximation, in output order.
SCHEME_LABELS = {
    "forward": "Forward difference",
    "backward": "Backward difference",
    "central": "Central difference",
}

_EXPONENT = re.compile(r"e([+-])0*(\d)")


def _special(value: float) -> str | None:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return None


def to_fixed(value: float, digits: int = 6) -> str:
    """Formats ``value`` with a fixed number of decimals.

    ``nan`` and infinities are spelled ``NaN``, ``Infinity`` and
    ``-Infinity``. Magnitudes of ``1e21`` and above fall back to
    :func:`format_number`.
    """
    value = float(value)
    special = _special(value)
    if special is not None:
        return special
    if abs(value) >= 1e21:
        return format_number(value)
    # Ties round away from zero on the exact binary value, like toFixed.
    with localcontext() as ctx:
        ctx.prec = 128
        rounded = Decimal(abs(value)).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    text = format(rounded, "f")
    return "-" + text if value < 0 else text


def format_number(value: float) -> str:
    """Shortest text for ``value``; whole numbers are written without ``.0``.

    Exponent notation is used only below ``1e-6`` and from ``1e21`` up.
    """
    value = float(value)
    special = _special(value)
    if special is not None:
        return special
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if 1e-6 <= abs(value) < 1e21:
        return np.format_float_positional(value, trim="-")
    return _EXPONENT.sub(r"e\1\2", repr(value))


def format_result(result: CalculatorResult, digits: int = 6) -> list[str]:
    """Renders a calculator result as display lines.

    The first line names the function and point, the second gives the exact
    derivative, and one line per approximation follows with its signed error.

    Args:
        result: The result to render.
        digits: Number of decimals for values and errors.

    Returns:
        The display lines, without trailing newlines.
    """
    lines = [
        f"Results for f(x) = x^{format_number(result.n)} at x = {format_number(result.x)}",
        f"Exact derivative: {to_fixed(result.exact, digits)}",
    ]
    for scheme, label in SCHEME_LABELS.items():
        value = getattr(result, scheme)
        lines.append(
            f"{label}: {to_fixed(value, digits)} "
            f"(error: {to_fixed(result.error(scheme), digits)})"
        )
    return lines


def format_session(
    session: CalculatorSession,
    config: Optional[CalculatorConfig] = None,
) -> list[str]:
    """Renders the last result of a session, or nothing before the first calculation."""
    if session.result is None:
        return []
    digits = (config or CalculatorConfig()).digits
    return format_result(session.result, digits)
