"""Locations Application Layer."""

from loc8r.application.locations.commands import (
    CreateLocationCommand,
    DeleteLocationCommand,
    UpdateLocationCommand,
)
from loc8r.application.locations.dto import LocationFields, NearbyLocationDTO, NearbyRequest
from loc8r.application.locations.ports import LocationStore
from loc8r.application.locations.queries import GetLocationQuery, GetNearbyLocationsQuery
from loc8r.application.locations.services import GeoQueryEngine

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
