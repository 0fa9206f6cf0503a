"""Domain Services."""

from loc8r.domain.services.spherical_distance import (
    EARTH_RADIUS_METERS,
    great_circle_meters,
)

__all__ = ["EARTH_RADIUS_METERS", "great_circle_meters"]
