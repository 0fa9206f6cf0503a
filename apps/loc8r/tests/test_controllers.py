"""HTTP Controllers 단위 테스트."""

from __future__ import annotations

from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from loc8r.application.common.exceptions import InvalidArgumentError, UpstreamFailureError
from loc8r.domain.entities import Location
from loc8r.domain.exceptions import LocationNotFoundError
from loc8r.main import create_app
from loc8r.presentation.http.controllers.locations import (
    _parse_float_param,
    _parse_location_id,
)


@pytest.fixture
def client(store) -> TestClient:
    """메모리 저장소가 주입된 TestClient."""
    return TestClient(create_app(store=store))


@pytest.fixture
def seeded_cafe(store, test_cafe: Location) -> Location:
    store.seed(test_cafe)
    return test_cafe


class TestParseFloatParam:
    """_parse_float_param 테스트."""

    def test_missing_returns_none(self) -> None:
        assert _parse_float_param("lng", None) is None
        assert _parse_float_param("lng", "  ") is None

    def test_number(self) -> None:
        assert _parse_float_param("lng", "126.9707") == 126.9707

    @pytest.mark.parametrize("raw", ["abc", "nan", "inf", "12abc"])
    def test_invalid_value_raises_error(self, raw: str) -> None:
        with pytest.raises(InvalidArgumentError):
            _parse_float_param("lng", raw)


class TestParseLocationId:
    """_parse_location_id 테스트."""

    def test_valid_uuid(self) -> None:
        location_id = uuid4()
        assert _parse_location_id(str(location_id)) == location_id

    def test_malformed_id_is_not_found(self) -> None:
        with pytest.raises(LocationNotFoundError):
            _parse_location_id("not-a-valid-id")


class TestHealthController:
    """Health Controller 테스트."""

    def test_health_check(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "loc8r-api"}

    def test_ping(self, client: TestClient) -> None:
        response = client.get("/ping")
        assert response.status_code == 200
        assert response.json() == "pong"


class TestListByDistance:
    """GET /api/locations 테스트."""

    def test_empty_store(self, client: TestClient) -> None:
        response = client.get("/api/locations", params={"lng": 126.9707, "lat": 37.5544})
        assert response.status_code == 200
        assert response.json() == []

    def test_returns_nearest_first(self, client: TestClient, seeded_cafe: Location) -> None:
        response = client.get(
            "/api/locations",
            params={"lng": 126.9707, "lat": 37.5544, "maxDistance": 2000000000000},
        )

        assert response.status_code == 200
        body = response.json()
        assert body == [
            {
                "_id": str(seeded_cafe.id),
                "name": "Test Cafe",
                "address": "서울특별시 중구 한강대로 405",
                "rating": 3,
                "facilities": ["Hot drinks", "Premium wifi"],
                "distance": "11",
            }
        ]

    def test_max_distance_excludes(self, client: TestClient, seeded_cafe: Location) -> None:
        response = client.get(
            "/api/locations", params={"lng": 127.5, "lat": 37.5, "maxDistance": 100}
        )
        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.parametrize(
        "params",
        [
            {},
            {"lng": 126.9707},
            {"lat": 37.5544},
            {"lng": "abc", "lat": 37.5544},
            {"lng": 126.9707, "lat": "NaN"},
            {"lng": 200, "lat": 37.5544},
            {"lng": 126.9707, "lat": 37.5544, "maxDistance": -1},
            {"lng": 126.9707, "lat": 37.5544, "maxDistance": "far"},
        ],
    )
    def test_invalid_params(self, client: TestClient, params: dict) -> None:
        response = client.get("/api/locations", params=params)
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ARGUMENT"

    def test_store_failure_is_500(self) -> None:
        failing = AsyncMock()
        failing.find_nearest.side_effect = UpstreamFailureError("connection refused")
        client = TestClient(create_app(store=failing))

        response = client.get("/api/locations", params={"lng": 0, "lat": 0})

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"
        assert "connection refused" not in response.text

    def test_unexpected_error_is_500(self) -> None:
        failing = AsyncMock()
        failing.find_nearest.side_effect = RuntimeError("boom")
        client = TestClient(create_app(store=failing), raise_server_exceptions=False)

        response = client.get("/api/locations", params={"lng": 0, "lat": 0})

        assert response.status_code == 500
        assert "boom" not in response.text

    def test_missing_store_is_503(self) -> None:
        client = TestClient(create_app())
        response = client.get("/api/locations", params={"lng": 0, "lat": 0})
        assert response.status_code == 503
        assert response.json()["code"] == "SERVICE_UNAVAILABLE"


class TestCreateLocation:
    """POST /api/locations 테스트."""

    def test_create(self, client: TestClient, create_payload: dict) -> None:
        response = client.post("/api/locations", json=create_payload)

        assert response.status_code == 201
        body = response.json()
        UUID(body["_id"])
        assert body["name"] == "Starcups"
        assert body["facilities"] == ["Hot drinks", "Food", "Premium wifi"]
        assert body["coords"] == [-0.9690884, 51.455041]
        assert body["rating"] == 0
        assert body["openingTimes"] == [
            {"days": "Monday - Friday", "opening": "7:00am", "closing": "7:00pm", "closed": False},
            {"days": "Saturday", "opening": "8:00am", "closing": "5:00pm", "closed": False},
        ]

    def test_create_then_get(self, client: TestClient, create_payload: dict) -> None:
        created = client.post("/api/locations", json=create_payload).json()

        response = client.get(f"/api/locations/{created['_id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_rating_and_unknown_fields_ignored(
        self, client: TestClient, create_payload: dict
    ) -> None:
        payload = {**create_payload, "rating": 5, "reviews": [{"author": "x"}]}

        body = client.post("/api/locations", json=payload).json()

        assert body["rating"] == 0
        assert "reviews" not in body

    def test_empty_slot_is_skipped(self, client: TestClient, create_payload: dict) -> None:
        payload = {k: v for k, v in create_payload.items() if not k.endswith("2")}
        body = client.post("/api/locations", json=payload).json()
        assert len(body["openingTimes"]) == 1

    def test_missing_address(self, client: TestClient, create_payload: dict) -> None:
        payload = {k: v for k, v in create_payload.items() if k != "address"}

        response = client.post("/api/locations", json=payload)

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_missing_coordinates(self, client: TestClient, create_payload: dict) -> None:
        payload = {k: v for k, v in create_payload.items() if k != "lat"}

        response = client.post("/api/locations", json=payload)

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    @pytest.mark.parametrize("lng", ["abc", 181, -200])
    def test_malformed_coordinates(
        self, client: TestClient, create_payload: dict, lng: object
    ) -> None:
        response = client.post("/api/locations", json={**create_payload, "lng": lng})
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"


class TestReadLocation:
    """GET /api/locations/{id} 테스트."""

    def test_read(self, client: TestClient, seeded_cafe: Location) -> None:
        response = client.get(f"/api/locations/{seeded_cafe.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["_id"] == str(seeded_cafe.id)
        assert body["coords"] == [126.9707, 37.5543]
        assert body["openingTimes"][1] == {
            "days": "Saturday",
            "opening": None,
            "closing": None,
            "closed": True,
        }

    def test_absent(self, client: TestClient) -> None:
        response = client.get(f"/api/locations/{uuid4()}")
        assert response.status_code == 404
        assert response.json() == {"detail": "Location not found", "code": "LOCATION_NOT_FOUND"}

    def test_malformed_id(self, client: TestClient) -> None:
        response = client.get("/api/locations/5f1b2c3d4e5f6a7b8c9d0e1f")
        assert response.status_code == 404


class TestUpdateLocation:
    """PUT /api/locations/{id} 테스트."""

    def test_update(
        self, client: TestClient, seeded_cafe: Location, create_payload: dict
    ) -> None:
        response = client.put(f"/api/locations/{seeded_cafe.id}", json=create_payload)

        assert response.status_code == 200
        body = response.json()
        assert body["_id"] == str(seeded_cafe.id)
        assert body["name"] == "Starcups"
        assert body["coords"] == [-0.9690884, 51.455041]

    def test_update_keeps_rating(
        self, client: TestClient, seeded_cafe: Location, create_payload: dict
    ) -> None:
        response = client.put(
            f"/api/locations/{seeded_cafe.id}", json={**create_payload, "rating": 1}
        )
        assert response.json()["rating"] == 3

    def test_absent(self, client: TestClient, create_payload: dict) -> None:
        response = client.put(f"/api/locations/{uuid4()}", json=create_payload)
        assert response.status_code == 404

    def test_malformed_payload(
        self, client: TestClient, seeded_cafe: Location, create_payload: dict
    ) -> None:
        response = client.put(
            f"/api/locations/{seeded_cafe.id}", json={**create_payload, "address": ""}
        )
        assert response.status_code == 400


class TestDeleteLocation:
    """DELETE /api/locations/{id} 테스트."""

    def test_delete(self, client: TestClient, seeded_cafe: Location) -> None:
        response = client.delete(f"/api/locations/{seeded_cafe.id}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/api/locations/{seeded_cafe.id}").status_code == 404

    def test_delete_twice(self, client: TestClient, seeded_cafe: Location) -> None:
        assert client.delete(f"/api/locations/{seeded_cafe.id}").status_code == 204
        assert client.delete(f"/api/locations/{seeded_cafe.id}").status_code == 404

    def test_delete_nonexistent(self, client: TestClient) -> None:
        assert client.delete(f"/api/locations/{uuid4()}").status_code == 404
