"""Application DTOs."""

from loc8r.application.locations.dto.location_fields import LocationFields
from loc8r.application.locations.dto.nearby_entry import NearbyLocationDTO
from loc8r.application.locations.dto.nearby_request import NearbyRequest

__all__ = ["LocationFields", "NearbyLocationDTO", "NearbyRequest"]
