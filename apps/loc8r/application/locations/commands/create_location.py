"""Create location command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from loc8r.application.locations.dto import LocationFields
from loc8r.application.locations.services import LocationFieldsValidator
from loc8r.domain.entities import Location

if TYPE_CHECKING:
    from loc8r.application.locations.ports import LocationStore

logger = logging.getLogger(__name__)


class CreateLocationCommand:
    """장소 생성 유스케이스."""

    def __init__(self, location_store: "LocationStore") -> None:
        self._store = location_store

    async def execute(self, fields: LocationFields) -> Location:
        """장소를 생성합니다.

        Raises:
            LocationValidationError: address 또는 좌표 누락/오류
        """
        coordinates = LocationFieldsValidator.validate(fields)
        location = Location(
            name=fields.name,
            address=fields.address,
            coordinates=coordinates,
            facilities=list(fields.facilities),
            opening_times=list(fields.opening_times),
        )
        created = await self._store.add(location)
        logger.info("Location created", extra={"location_id": str(created.id)})
        return created
