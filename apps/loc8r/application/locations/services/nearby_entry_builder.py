"""Nearby Entry Builder Service.

(Location, 거리) 결과를 NearbyLocationDTO로 변환합니다.
"""

from __future__ import annotations

import math

from loc8r.application.locations.dto.nearby_entry import NearbyLocationDTO
from loc8r.domain.entities import Location


class NearbyEntryBuilder:
    """주변 장소 엔트리 빌더 서비스."""

    @classmethod
    def build(cls, location: Location, distance_meters: float) -> NearbyLocationDTO:
        return NearbyLocationDTO(
            id=location.id,
            name=location.name,
            address=location.address,
            rating=location.rating,
            facilities=list(location.facilities),
            distance=cls._format_meters(distance_meters),
        )

    @staticmethod
    def _format_meters(distance_meters: float) -> str:
        """가장 가까운 정수 미터로 반올림한 문자열 (0.5는 올림)."""
        return str(math.floor(distance_meters + 0.5))
