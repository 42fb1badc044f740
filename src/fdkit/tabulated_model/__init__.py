"""Tabulated data models."""

from fdkit.tabulated_model.one_d import TabulatedSeries

__all__ = ["TabulatedSeries"]
