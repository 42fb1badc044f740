"""Utility helpers shared across fdkit."""
