"""Location Store Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from loc8r.domain.entities import Location
from loc8r.domain.value_objects import Coordinates


class LocationStore(ABC):
    """장소 저장소 포트.

    Infrastructure Layer에서 구현합니다. 구현체는 저장소 오류를
    UpstreamFailureError로 변환해야 합니다.
    """

    @abstractmethod
    async def add(self, location: Location) -> Location:
        """새 장소를 저장합니다."""
        ...

    @abstractmethod
    async def get_by_id(self, location_id: UUID) -> Location | None:
        """ID로 장소를 조회합니다.

        Returns:
            Location 또는 None (미발견 시)
        """
        ...

    @abstractmethod
    async def save(self, location: Location) -> Location | None:
        """기존 장소를 덮어씁니다.

        name, address, coordinates, facilities, opening_times만 기록하며
        rating은 절대 기록하지 않습니다.

        Returns:
            저장된 Location 또는 None (이미 삭제된 경우)
        """
        ...

    @abstractmethod
    async def delete(self, location_id: UUID) -> bool:
        """장소를 삭제합니다.

        Returns:
            삭제된 행이 있으면 True
        """
        ...

    @abstractmethod
    async def find_nearest(
        self,
        point: Coordinates,
        max_distance: float,
    ) -> list[tuple[Location, float]]:
        """기준 좌표에서 max_distance(미터) 이내의 장소를 가까운 순으로 반환합니다.

        거리는 반지름 6,378,100m 구면의 대원 거리입니다. 거리가 같으면
        삽입 순서(created_at, id)를 유지합니다.

        Returns:
            (Location, 거리_m) 목록
        """
        ...

    @abstractmethod
    async def list_all(self) -> list[Location]:
        """전체 장소를 삽입 순서(created_at, id)로 반환합니다."""
        ...
