"""Worked solutions to classic algorithm exercises, grouped by topic."""

__version__ = "0.1.0"