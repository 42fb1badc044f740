"""Accuracy analysis of finite-difference schemes."""

from fdkit.analysis.convergence import (
    StepStudyRow,
    observed_order,
    power_convergence,
    step_size_study,
)

__all__ = [
    "StepStudyRow",
    "observed_order",
    "power_convergence",
    "step_size_study",
]
