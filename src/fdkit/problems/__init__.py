"""Worked problem set: statements, solutions and solution visibility."""

from fdkit.problems.catalog import PROBLEMS, Problem, get_problem
from fdkit.problems.solutions import solve
from fdkit.problems.visibility import SolutionVisibility

__all__ = [
    "PROBLEMS",
    "Problem",
    "SolutionVisibility",
    "get_problem",
    "solve",
]
