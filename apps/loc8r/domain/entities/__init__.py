"""Domain Entities."""

from loc8r.domain.entities.location import Location, OpeningTime

__all__ = ["Location", "OpeningTime"]
