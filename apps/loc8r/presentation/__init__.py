"""Loc8r Presentation Layer."""
