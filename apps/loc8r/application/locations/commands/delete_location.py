"""Delete location command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from loc8r.domain.exceptions import LocationNotFoundError

if TYPE_CHECKING:
    from loc8r.application.locations.ports import LocationStore

logger = logging.getLogger(__name__)


class DeleteLocationCommand:
    """장소 삭제 유스케이스."""

    def __init__(self, location_store: "LocationStore") -> None:
        self._store = location_store

    async def execute(self, location_id: UUID) -> None:
        """장소를 삭제합니다.

        이미 삭제된 ID를 다시 삭제해도 LocationNotFoundError만 발생합니다.

        Raises:
            LocationNotFoundError: 장소를 찾을 수 없음
        """
        removed = await self._store.delete(location_id)
        if not removed:
            raise LocationNotFoundError(location_id)
        logger.info("Location deleted", extra={"location_id": str(location_id)})
