"""도메인 예외."""

from loc8r.domain.exceptions.base import DomainError
from loc8r.domain.exceptions.location import InvalidCoordinatesError, LocationNotFoundError

__all__ = [
    "DomainError",
    "InvalidCoordinatesError",
    "LocationNotFoundError",
]
