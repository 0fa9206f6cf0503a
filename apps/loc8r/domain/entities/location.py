"""Location Entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from loc8r.domain.value_objects import Coordinates


@dataclass(frozen=True)
class OpeningTime:
    """영업 시간 슬롯."""

    days: str | None = None
    opening: str | None = None
    closing: str | None = None
    closed: bool = False


@dataclass
class Location:
    """장소 엔티티.

    거리(distance)는 저장하지 않습니다. 조회 시점의 기준 좌표에 대해서만
    계산됩니다. rating은 리뷰 집계 결과이므로 update_details()로 바뀌지 않습니다.
    """

    name: str
    address: str
    coordinates: Coordinates
    facilities: list[str] = field(default_factory=list)
    opening_times: list[OpeningTime] = field(default_factory=list)
    rating: int = 0
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update_details(
        self,
        *,
        name: str,
        address: str,
        coordinates: Coordinates,
        facilities: list[str],
        opening_times: list[OpeningTime],
    ) -> None:
        """rating을 제외한 모든 필드를 덮어씁니다."""
        self.name = name
        self.address = address
        self.coordinates = coordinates
        self.facilities = list(facilities)
        self.opening_times = list(opening_times)
