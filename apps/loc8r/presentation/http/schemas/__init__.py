"""HTTP Schemas."""

from loc8r.presentation.http.schemas.location import (
    LocationResponse,
    LocationWriteRequest,
    NearbyLocationResponse,
    OpeningTimeSchema,
)

__all__ = [
    "LocationResponse",
    "LocationWriteRequest",
    "NearbyLocationResponse",
    "OpeningTimeSchema",
]
