"""Finite-difference teaching kit: evaluator, calculator and worked problems."""

from importlib.metadata import PackageNotFoundError, version

from fdkit.calculator import CalculatorInput, CalculatorResult, CalculatorSession
from fdkit.calculator_config import CalculatorConfig
from fdkit.finite.evaluator import DifferenceEstimates, evaluate
from fdkit.problems import PROBLEMS, SolutionVisibility, solve
from fdkit.report import format_result

try:
    __version__ = version("fdkit")
except PackageNotFoundError:
    pass

__all__ = [
    "CalculatorConfig",
    "CalculatorInput",
    "CalculatorResult",
    "CalculatorSession",
    "DifferenceEstimates",
    "PROBLEMS",
    "SolutionVisibility",
    "evaluate",
    "format_result",
    "solve",
]
