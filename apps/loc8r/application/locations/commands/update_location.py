"""Update location command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from loc8r.application.locations.dto import LocationFields
from loc8r.application.locations.services import LocationFieldsValidator
from loc8r.domain.entities import Location
from loc8r.domain.exceptions import LocationNotFoundError

if TYPE_CHECKING:
    from loc8r.application.locations.ports import LocationStore

logger = logging.getLogger(__name__)


class UpdateLocationCommand:
    """장소 수정 유스케이스.

    name, address, facilities, coordinates, opening_times 전체를 덮어씁니다.
    rating은 요청 내용과 관계없이 변경하지 않습니다.
    """

    def __init__(self, location_store: "LocationStore") -> None:
        self._store = location_store

    async def execute(self, location_id: UUID, fields: LocationFields) -> Location:
        """장소를 수정합니다.

        Raises:
            LocationNotFoundError: 장소를 찾을 수 없음
            LocationValidationError: address 또는 좌표 누락/오류
        """
        logger.info("Location update requested", extra={"location_id": str(location_id)})

        location = await self._store.get_by_id(location_id)
        if location is None:
            raise LocationNotFoundError(location_id)

        coordinates = LocationFieldsValidator.validate(fields)
        location.update_details(
            name=fields.name,
            address=fields.address,
            coordinates=coordinates,
            facilities=fields.facilities,
            opening_times=fields.opening_times,
        )

        saved = await self._store.save(location)
        if saved is None:
            # 조회 이후 다른 요청이 삭제한 경우
            raise LocationNotFoundError(location_id)
        return saved
