"""Nearby Request DTO."""

from __future__ import annotations

from dataclasses import dataclass

from loc8r.application.locations.constants import DEFAULT_MAX_DISTANCE_METERS


@dataclass
class NearbyRequest:
    """주변 장소 검색 요청 DTO."""

    longitude: float
    latitude: float
    max_distance: float = DEFAULT_MAX_DISTANCE_METERS
