"""Loc8r Application Layer."""

from loc8r.application.locations import (
    CreateLocationCommand,
    DeleteLocationCommand,
    GeoQueryEngine,
    GetLocationQuery,
    GetNearbyLocationsQuery,
    LocationFields,
    LocationStore,
    NearbyLocationDTO,
    NearbyRequest,
    UpdateLocationCommand,
)

__all__ = [
    "CreateLocationCommand",
    "DeleteLocationCommand",
    "GeoQueryEngine",
    "GetLocationQuery",
    "GetNearbyLocationsQuery",
    "LocationFields",
    "LocationStore",
    "NearbyLocationDTO",
    "NearbyRequest",
    "UpdateLocationCommand",
]
