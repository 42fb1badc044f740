"""Pytest configuration file with shared calculator fixtures."""

import pytest

from fdkit.calculator import CalculatorSession
from fdkit.calculator_config import CalculatorConfig

__all__ = ["default_session"]


@pytest.fixture
def default_session():
    """A calculator session in its initial state: x**2 at x=2 with h=0.01."""
    return CalculatorSession.from_config(CalculatorConfig())
