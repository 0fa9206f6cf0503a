"""Get Nearby Locations Query.

기준 좌표에서 가까운 장소를 조회하는 Query(지휘자)입니다.
입력 검증은 GeoQueryEngine이, 거리 계산과 정렬은 저장소(Port)가 담당합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from loc8r.application.locations.dto import NearbyLocationDTO, NearbyRequest
from loc8r.application.locations.services import GeoQueryEngine, NearbyEntryBuilder

if TYPE_CHECKING:
    from loc8r.application.locations.ports import LocationStore

logger = logging.getLogger(__name__)


class GetNearbyLocationsQuery:
    """주변 장소 조회 Query.

    Workflow:
        1. 기준 좌표/최대 거리 검증 (Service)
        2. 최근접 장소 조회, 거리 필터링과 정렬 (Port)
        3. DTO 변환 (Service)
    """

    def __init__(self, location_store: "LocationStore") -> None:
        self._store = location_store

    async def execute(self, request: NearbyRequest) -> list[NearbyLocationDTO]:
        """주변 장소를 가까운 순으로 반환합니다.

        Raises:
            InvalidArgumentError: 좌표 또는 maxDistance가 잘못됨
        """
        point = GeoQueryEngine.to_point(request.longitude, request.latitude)
        max_distance = GeoQueryEngine.validate_max_distance(request.max_distance)

        logger.info(
            "Nearby search started",
            extra={"lng": point.longitude, "lat": point.latitude, "max_distance_m": max_distance},
        )

        hits = await self._store.find_nearest(point, max_distance)
        entries = [NearbyEntryBuilder.build(location, distance) for location, distance in hits]

        logger.info("Nearby search completed", extra={"results_count": len(entries)})
        return entries
