"""Test fixtures for loc8r tests."""

from __future__ import annotations

import copy
from uuid import UUID

import pytest

from loc8r.application.locations.ports import LocationStore
from loc8r.application.locations.services import GeoQueryEngine
from loc8r.domain.entities import Location, OpeningTime
from loc8r.domain.value_objects import Coordinates


class FakeLocationStore(LocationStore):
    """메모리 기반 LocationStore. dict 삽입 순서가 곧 저장 순서입니다."""

    def __init__(self) -> None:
        self._rows: dict[UUID, Location] = {}

    async def add(self, location: Location) -> Location:
        self._rows[location.id] = copy.deepcopy(location)
        return copy.deepcopy(location)

    async def get_by_id(self, location_id: UUID) -> Location | None:
        row = self._rows.get(location_id)
        return copy.deepcopy(row) if row is not None else None

    async def save(self, location: Location) -> Location | None:
        row = self._rows.get(location.id)
        if row is None:
            return None
        row.update_details(
            name=location.name,
            address=location.address,
            coordinates=location.coordinates,
            facilities=location.facilities,
            opening_times=location.opening_times,
        )
        return copy.deepcopy(row)

    async def delete(self, location_id: UUID) -> bool:
        return self._rows.pop(location_id, None) is not None

    async def list_all(self) -> list[Location]:
        return [copy.deepcopy(row) for row in self._rows.values()]

    async def find_nearest(
        self,
        point: Coordinates,
        max_distance: float,
    ) -> list[tuple[Location, float]]:
        rows = await self.list_all()
        return GeoQueryEngine.nearest(point, rows, max_distance)

    def seed(self, location: Location) -> None:
        self._rows[location.id] = copy.deepcopy(location)

    def set_rating(self, location_id: UUID, rating: int) -> None:
        """리뷰 집계 결과를 흉내냅니다."""
        self._rows[location_id].rating = rating


@pytest.fixture
def store() -> FakeLocationStore:
    """빈 메모리 저장소."""
    return FakeLocationStore()


@pytest.fixture
def test_cafe() -> Location:
    """테스트용 장소 (서울역 인근)."""
    return Location(
        name="Test Cafe",
        address="서울특별시 중구 한강대로 405",
        coordinates=Coordinates(longitude=126.9707, latitude=37.5543),
        facilities=["Hot drinks", "Premium wifi"],
        opening_times=[
            OpeningTime(days="Monday - Friday", opening="7:00am", closing="7:00pm"),
            OpeningTime(days="Saturday", closed=True),
        ],
        rating=3,
    )


@pytest.fixture
def create_payload() -> dict:
    """생성/수정 요청 본문."""
    return {
        "name": "Starcups",
        "address": "125 High Street, Reading, RG6 1PS",
        "facilities": "Hot drinks, Food ,Premium wifi,Food",
        "lng": -0.9690884,
        "lat": 51.455041,
        "days1": "Monday - Friday",
        "opening1": "7:00am",
        "closing1": "7:00pm",
        "closed1": False,
        "days2": "Saturday",
        "opening2": "8:00am",
        "closing2": "5:00pm",
        "closed2": False,
    }
