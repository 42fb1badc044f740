"""Unit tests for public API."""

from __future__ import annotations

import fdkit
from fdkit import CalculatorSession, evaluate, format_result


def test_public_all_contains_entry_points():
    """Test that __all__ lists the main entry points."""
    expected = {"evaluate", "CalculatorSession", "SolutionVisibility", "solve", "format_result"}
    assert expected.issubset(set(fdkit.__all__))


def test_end_to_end_calculation():
    """Edit, calculate and render in one pass."""
    session = CalculatorSession().update_input("power", "3").update_input("step_size", "0.1")
    lines = format_result(session.calculate().result)
    assert lines[0] == "Results for f(x) = x^3 at x = 2"
    assert lines[-1] == "Central difference: 12.010000 (error: 0.010000)"
    assert evaluate(3, 2, 0.1).exact == 12.0
