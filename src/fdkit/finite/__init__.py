"""Finite-difference engines: the power-function evaluator and general stencils."""

from fdkit.finite.difference import (
    backward_difference,
    central_difference,
    finite_difference,
    five_point_central_difference,
    forward_difference,
    second_central_difference,
)
from fdkit.finite.evaluator import DifferenceEstimates, evaluate

__all__ = [
    "DifferenceEstimates",
    "evaluate",
    "finite_difference",
    "forward_difference",
    "backward_difference",
    "central_difference",
    "five_point_central_difference",
    "second_central_difference",
]
