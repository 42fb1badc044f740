"""The ten worked numerical-differentiation problems."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "DIFFICULTIES",
    "EXPERIMENT_DATA",
    "PROBLEMS",
    "Problem",
    "TEMPERATURE_DATA",
    "get_problem",
]

#: Allowed difficulty levels, easiest first.
DIFFICULTIES = ("easy", "medium", "hard")

#: Samples of ``e**x`` used by Problem 3, as ``(x, f(x))`` columns.
EXPERIMENT_DATA = (
    (1.0, 1.2, 1.4, 1.6, 1.8),
    (2.7183, 3.3201, 4.0552, 4.9530, 6.0496),
)

#: Noisy temperature readings used by Problem 9, as ``(hours, deg C)`` columns.
TEMPERATURE_DATA = (
    (0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0),
    (20.1, 22.3, 25.8, 28.9, 31.2, 32.8, 33.7),
)


@dataclass(frozen=True)
class Problem:
    """A problem statement.

    Attributes:
        id: Identifier of the problem, also the key of its solution.
        title: Display title.
        difficulty: One of :data:`DIFFICULTIES`.
        given: What the problem provides.
        find: What the reader has to compute.
    """

    id: str
    title: str
    difficulty: str
    given: str
    find: str

    def __post_init__(self):
        if self.difficulty not in DIFFICULTIES:
            raise ValueError(
                f"[Problem] difficulty must be one of {list(DIFFICULTIES)}, "
                f"got {self.difficulty!r}."
            )

    @property
    def difficulty_label(self) -> str:
        """Capitalised difficulty, e.g. ``"Easy"``."""
        return self.difficulty.capitalize()


PROBLEMS = (
    Problem(
        "sol1", "Problem 1", "easy",
        given="f(x) = x³ at x = 2, h = 0.1",
        find="Approximate f'(2) using forward, backward, and central difference "
             "methods. Compare with the exact value.",
    ),
    Problem(
        "sol2", "Problem 2", "medium",
        given="f(x) = sin(x) at x = π/4, h = 0.01",
        find="f'(π/4) using central difference and calculate the percentage error.",
    ),
    Problem(
        "sol3", "Problem 3", "medium",
        given="Data points from an experiment: x = 1.0, 1.2, 1.4, 1.6, 1.8; "
              "f(x) = 2.7183, 3.3201, 4.0552, 4.9530, 6.0496",
        find="Estimate f'(1.4) using available data points.",
    ),
    Problem(
        "sol4", "Problem 4", "hard",
        given="f(x) = x⁴ - 2x³ + x at x = 1",
        find="Compare the accuracy of forward difference method for h = 0.1, 0.01, "
             "and 0.001. Also find the second derivative f''(1) using the central "
             "difference formula.",
    ),
    Problem(
        "sol5", "Problem 5", "hard",
        given="f(x) = e^x at x = 1; round-off error ≈ ε|f(x)|/h with ε ≈ 10⁻¹⁶",
        find="Find the optimal step size h that minimizes total error "
             "(truncation + round-off) for central difference method.",
    ),
    Problem(
        "sol6", "Problem 6", "medium",
        given="f(x) = ln(x) at x = 2",
        find="Use Richardson extrapolation to improve the accuracy of central "
             "difference approximation. Compare results with h = 0.1 and h = 0.05.",
    ),
    Problem(
        "sol7", "Problem 7", "hard",
        given="f(x) = x²e^x at x = 1, h = 0.01",
        find="Calculate both f'(1) and f''(1) using appropriate finite difference "
             "formulas. Compare 3-point and 5-point central difference methods.",
    ),
    Problem(
        "sol8", "Problem 8", "medium",
        given="f(x) = √x at x = 4",
        find="Study the convergence behavior of forward and central difference "
             "methods by using h = 0.5, 0.1, and 0.01. Analyze the rate of convergence.",
    ),
    Problem(
        "sol9", "Problem 9", "hard",
        given="Experimental temperature data with measurement noise: "
              "t = 0..6 hours, T = 20.1, 22.3, 25.8, 28.9, 31.2, 32.8, 33.7 °C",
        find="Estimate dT/dt at t = 3 hours using different approaches to handle the "
             "noise. Compare direct differentiation vs. smoothing methods.",
    ),
    Problem(
        "sol10", "Problem 10", "hard",
        given="f(x) = 1/(1 + x²) (Runge function)",
        find="Investigate the effect of round-off errors in numerical differentiation. "
             "Find the optimal step size that minimizes total error (truncation + "
             "round-off) and demonstrate the fundamental limitation of finite "
             "difference methods.",
    ),
)

_BY_ID = {problem.id: problem for problem in PROBLEMS}


def get_problem(problem_id: str) -> Problem:
    """Looks up a problem by identifier.

    Raises:
        KeyError: If no problem has that identifier.
    """
    try:
        return _BY_ID[problem_id]
    except KeyError:
        raise KeyError(f"Unknown problem id: {problem_id!r}") from None
