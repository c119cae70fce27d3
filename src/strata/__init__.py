"""Strata - deterministic side-view world generation."""

__version__ = "0.1.0"
