"""Loc8r Domain Layer."""

from loc8r.domain.entities import Location, OpeningTime
from loc8r.domain.value_objects import Coordinates

__all__ = ["Location", "OpeningTime", "Coordinates"]
