"""Deterministic wealth projections and retirement metrics."""

__version__ = "0.1.0"
