"""Which worked solutions are currently shown."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SolutionVisibility"]


@dataclass(frozen=True)
class SolutionVisibility:
    """Immutable set of problem ids whose solutions are visible.

    All solutions start hidden. :meth:`toggle` flips one id and returns a
    new snapshot; other ids are never affected.

    Example:
        >>> state = SolutionVisibility().toggle("sol1")
        >>> state.is_visible("sol1"), state.is_visible("sol2")
        (True, False)
        >>> state.toggle("sol1") == SolutionVisibility()
        True
    """

    visible: frozenset = frozenset()

    def is_visible(self, problem_id: str) -> bool:
        return problem_id in self.visible

    def toggle(self, problem_id: str) -> SolutionVisibility:
        if problem_id in self.visible:
            return SolutionVisibility(self.visible - {problem_id})
        return SolutionVisibility(self.visible | {problem_id})

    def button_label(self, problem_id: str) -> str:
        """Text of the button that toggles ``problem_id``."""
        return "Hide Solution" if self.is_visible(problem_id) else "Show Solution"
