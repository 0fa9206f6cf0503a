"""Locations API HTTP Client."""

from loc8r.infrastructure.integrations.locations_api.client import (
    LocationDetail,
    LocationsApiClient,
    NearbyPlace,
    format_distance,
)

__all__ = ["LocationsApiClient", "LocationDetail", "NearbyPlace", "format_distance"]
