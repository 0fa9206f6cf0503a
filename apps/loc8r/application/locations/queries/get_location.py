"""Get Location Query."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from loc8r.domain.entities import Location
from loc8r.domain.exceptions import LocationNotFoundError

if TYPE_CHECKING:
    from loc8r.application.locations.ports import LocationStore


class GetLocationQuery:
    """장소 단건 조회 Query."""

    def __init__(self, location_store: "LocationStore") -> None:
        self._store = location_store

    async def execute(self, location_id: UUID) -> Location:
        location = await self._store.get_by_id(location_id)
        if location is None:
            raise LocationNotFoundError(location_id)
        return location
