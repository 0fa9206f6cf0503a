"""Domain Value Objects."""

from loc8r.domain.value_objects.coordinates import Coordinates

__all__ = ["Coordinates"]
