"""Application Queries."""

from loc8r.application.locations.queries.get_location import GetLocationQuery
from loc8r.application.locations.queries.get_nearby_locations import (
    GetNearbyLocationsQuery,
)

__all__ = ["GetLocationQuery", "GetNearbyLocationsQuery"]
