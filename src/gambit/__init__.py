"""Gambit: a chess rules engine with a cooperative game clock."""

__version__ = "0.1.0"
