"""Operational jobs."""
