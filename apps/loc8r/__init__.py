"""Loc8r Locations API."""

__version__ = "1.0.0"
