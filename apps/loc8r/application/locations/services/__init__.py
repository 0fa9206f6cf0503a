"""Application Services."""

from loc8r.application.locations.services.facilities import split_facilities
from loc8r.application.locations.services.geo_query_engine import GeoQueryEngine
from loc8r.application.locations.services.location_fields_validator import (
    LocationFieldsValidator,
)
from loc8r.application.locations.services.nearby_entry_builder import NearbyEntryBuilder

__all__ = [
    "GeoQueryEngine",
    "LocationFieldsValidator",
    "NearbyEntryBuilder",
    "split_facilities",
]
