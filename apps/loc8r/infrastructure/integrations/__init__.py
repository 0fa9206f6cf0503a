"""External Integrations."""

from loc8r.infrastructure.integrations.locations_api import (
    LocationDetail,
    LocationsApiClient,
    NearbyPlace,
    format_distance,
)

__all__ = ["LocationsApiClient", "LocationDetail", "NearbyPlace", "format_distance"]
