"""Geo Query Engine.

기준 좌표에서 가까운 순으로 장소를 정렬합니다.
Port 의존성이 없는 순수 로직입니다.
"""

from __future__ import annotations

import math
from typing import Iterable

from loc8r.application.common.exceptions import InvalidArgumentError
from loc8r.application.locations.constants import DEFAULT_MAX_DISTANCE_METERS
from loc8r.domain.entities import Location
from loc8r.domain.exceptions import InvalidCoordinatesError
from loc8r.domain.services import great_circle_meters
from loc8r.domain.value_objects import Coordinates


class GeoQueryEngine:
    """최근접 장소 조회 엔진."""

    @staticmethod
    def to_point(longitude: float, latitude: float) -> Coordinates:
        """조회 기준 좌표를 검증합니다."""
        try:
            return Coordinates(longitude=longitude, latitude=latitude)
        except InvalidCoordinatesError as exc:
            raise InvalidArgumentError(exc.message) from exc

    @staticmethod
    def validate_max_distance(max_distance: float) -> float:
        if (
            isinstance(max_distance, bool)
            or not isinstance(max_distance, (int, float))
            or not math.isfinite(max_distance)
            or max_distance < 0
        ):
            raise InvalidArgumentError(
                f"maxDistance must be a finite, non-negative number: {max_distance!r}"
            )
        return float(max_distance)

    @classmethod
    def nearest(
        cls,
        point: Coordinates,
        locations: Iterable[Location],
        max_distance: float = DEFAULT_MAX_DISTANCE_METERS,
    ) -> list[tuple[Location, float]]:
        """가까운 순으로 (Location, 거리_m) 목록을 반환합니다.

        Args:
            point: 기준 좌표
            locations: 삽입 순서로 정렬된 후보 장소
            max_distance: 최대 거리 (미터), 초과하는 장소는 제외

        Returns:
            거리 오름차순 목록. 거리가 같으면 입력 순서를 유지합니다.
        """
        limit = cls.validate_max_distance(max_distance)
        hits: list[tuple[Location, float]] = []
        for location in locations:
            distance = great_circle_meters(point, location.coordinates)
            if distance > limit:
                continue
            hits.append((location, distance))
        # sort()는 안정 정렬이므로 동일 거리는 삽입 순서를 유지
        hits.sort(key=lambda hit: hit[1])
        return hits
