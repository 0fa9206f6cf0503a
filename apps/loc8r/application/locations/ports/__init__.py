"""Application Ports."""

from loc8r.application.locations.ports.location_store import LocationStore

__all__ = ["LocationStore"]
