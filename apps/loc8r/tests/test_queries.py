"""Application Queries 단위 테스트."""

from __future__ import annotations

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from loc8r.application.common.exceptions import InvalidArgumentError
from loc8r.application.locations.dto import NearbyRequest
from loc8r.application.locations.queries import GetLocationQuery, GetNearbyLocationsQuery
from loc8r.domain.entities import Location
from loc8r.domain.exceptions import LocationNotFoundError
from loc8r.domain.value_objects import Coordinates

pytestmark = pytest.mark.asyncio


class TestGetNearbyLocationsQuery:
    """GetNearbyLocationsQuery 테스트."""

    async def test_empty_store_returns_empty_list(self, store) -> None:
        query = GetNearbyLocationsQuery(store)
        result = await query.execute(NearbyRequest(longitude=126.9707, latitude=37.5544))
        assert result == []

    async def test_test_cafe_scenario(self, store, test_cafe: Location) -> None:
        """1e-4도 떨어진 지점에서 조회하면 작은 양의 정수 거리로 첫 번째에 반환."""
        await store.add(test_cafe)
        await store.add(
            Location(
                name="Busan Cafe",
                address="부산광역시",
                coordinates=Coordinates(longitude=129.0756, latitude=35.1796),
            )
        )

        query = GetNearbyLocationsQuery(store)
        result = await query.execute(
            NearbyRequest(longitude=126.9707, latitude=37.5544, max_distance=2e12)
        )

        assert result[0].id == test_cafe.id
        assert result[0].name == "Test Cafe"
        assert result[0].distance == "11"
        assert 0 < int(result[0].distance) < 100
        assert [e.name for e in result] == ["Test Cafe", "Busan Cafe"]

    async def test_max_distance_filters(self, store, test_cafe: Location) -> None:
        await store.add(test_cafe)

        query = GetNearbyLocationsQuery(store)
        result = await query.execute(NearbyRequest(longitude=127.5, latitude=37.5, max_distance=10))

        assert result == []

    async def test_invalid_point_does_not_hit_store(self) -> None:
        mock_store = AsyncMock()
        query = GetNearbyLocationsQuery(mock_store)

        with pytest.raises(InvalidArgumentError):
            await query.execute(NearbyRequest(longitude=float("nan"), latitude=0.0))

        mock_store.find_nearest.assert_not_called()

    async def test_delegates_nearest_search_to_store(self, test_cafe: Location) -> None:
        """거리 계산과 정렬은 저장소의 find_nearest에 위임하고 전체 목록은 읽지 않음."""
        mock_store = AsyncMock()
        mock_store.find_nearest.return_value = [(test_cafe, 11.13)]

        query = GetNearbyLocationsQuery(mock_store)
        result = await query.execute(
            NearbyRequest(longitude=126.9707, latitude=37.5544, max_distance=500)
        )

        point, max_distance = mock_store.find_nearest.call_args.args
        assert point == Coordinates(longitude=126.9707, latitude=37.5544)
        assert max_distance == 500.0
        mock_store.list_all.assert_not_called()
        assert [e.distance for e in result] == ["11"]

    async def test_negative_max_distance(self, store) -> None:
        query = GetNearbyLocationsQuery(store)
        with pytest.raises(InvalidArgumentError):
            await query.execute(NearbyRequest(longitude=0.0, latitude=0.0, max_distance=-5))


class TestGetLocationQuery:
    """GetLocationQuery 테스트."""

    async def test_returns_location(self, store, test_cafe: Location) -> None:
        await store.add(test_cafe)

        result = await GetLocationQuery(store).execute(test_cafe.id)

        assert result.id == test_cafe.id
        assert result.coordinates.as_pair() == (126.9707, 37.5543)

    async def test_not_found(self, store) -> None:
        with pytest.raises(LocationNotFoundError):
            await GetLocationQuery(store).execute(uuid4())
