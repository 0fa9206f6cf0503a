"""Coordinates Value Object."""

from __future__ import annotations

import math
from dataclasses import dataclass

from loc8r.domain.exceptions.location import InvalidCoordinatesError


@dataclass(frozen=True)
class Coordinates:
    """WGS84 좌표.

    항상 (longitude, latitude) 순서로 다룹니다.
    """

    longitude: float
    latitude: float

    def __post_init__(self) -> None:
        if not _is_number(self.longitude) or not math.isfinite(self.longitude):
            raise InvalidCoordinatesError(f"Longitude must be a finite number: {self.longitude!r}")
        if not _is_number(self.latitude) or not math.isfinite(self.latitude):
            raise InvalidCoordinatesError(f"Latitude must be a finite number: {self.latitude!r}")
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidCoordinatesError(f"Longitude out of range: {self.longitude}")
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidCoordinatesError(f"Latitude out of range: {self.latitude}")

    @classmethod
    def from_pair(cls, pair: tuple[float, float] | list[float]) -> Coordinates:
        """[lng, lat] 쌍에서 생성합니다."""
        if len(pair) != 2:
            raise InvalidCoordinatesError("Coordinates must be a [longitude, latitude] pair")
        return cls(longitude=pair[0], latitude=pair[1])

    def as_pair(self) -> tuple[float, float]:
        return (self.longitude, self.latitude)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
