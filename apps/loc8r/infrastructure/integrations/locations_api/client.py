"""Locations API HTTP 클라이언트.

웹 계층이 Loc8r JSON API를 호출할 때 사용하는 httpx 구현체.
- 주변 장소 목록: GET /api/locations?lng=&lat=&maxDistance=
- 장소 상세: GET /api/locations/{id}
- 리다이렉트는 따라가지 않고 실패로 처리합니다.
"""

from __future__ import annotations

import asyncio
import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from loc8r.application.common.exceptions import UpstreamFailureError
from loc8r.domain.exceptions import InvalidCoordinatesError, LocationNotFoundError
from loc8r.domain.value_objects import Coordinates
from loc8r.infrastructure.observability import instrument_httpx

if TYPE_CHECKING:
    from loc8r.setup.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
LOCATIONS_PATH = "/api/locations"


def format_distance(meters: float) -> str:
    """거리를 표시용 문자열로 변환합니다.

    1000m 초과는 소수 첫째 자리 km, 그 외는 내림한 m 단위.

    >>> format_distance(1500)
    '1.5km'
    >>> format_distance(999.9)
    '999m'
    """
    if meters > 1000:
        return f"{meters / 1000:.1f}km"
    return f"{math.floor(meters)}m"


@dataclass(frozen=True)
class NearbyPlace:
    """주변 장소 목록 항목."""

    id: str
    name: str
    address: str
    rating: int
    facilities: list[str]
    distance_meters: float
    distance: str


@dataclass(frozen=True)
class LocationDetail:
    """장소 상세. 좌표는 {lng, lat} 형태로 노출합니다."""

    id: str
    name: str
    address: str
    rating: int
    facilities: list[str]
    coords: dict[str, float]
    opening_times: list[dict[str, Any]] = field(default_factory=list)


class LocationsApiClient:
    """Loc8r Locations API 클라이언트."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        home_longitude: float = 126.964062,
        home_latitude: float = 37.468769,
        home_max_distance_meters: float = 2_000_000.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._home = (home_longitude, home_latitude)
        self._home_max_distance = home_max_distance_meters
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> LocationsApiClient:
        """설정 기반으로 클라이언트를 생성합니다. otel_enabled면 HTTPX 계측을 켭니다."""
        instrument_httpx(settings)
        return cls(
            base_url=settings.api_base_url,
            timeout=settings.api_timeout_seconds,
            home_longitude=settings.home_longitude,
            home_latitude=settings.home_latitude,
            home_max_distance_meters=settings.home_max_distance_meters,
            transport=transport,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self._base_url,
                        timeout=self._timeout,
                        follow_redirects=False,
                        transport=self._transport,
                    )
        return self._client

    async def list_nearby(
        self,
        longitude: float,
        latitude: float,
        max_distance: float | None = None,
    ) -> list[NearbyPlace]:
        """좌표 기준 주변 장소를 거리순으로 조회합니다."""
        params: dict[str, Any] = {"lng": longitude, "lat": latitude}
        if max_distance is not None:
            params["maxDistance"] = max_distance

        data = await self._get_json(LOCATIONS_PATH, params=params)
        if not isinstance(data, list):
            logger.error(
                "Locations API returned unexpected body",
                extra={"body_type": type(data).__name__},
            )
            raise UpstreamFailureError("Unexpected response from locations API")

        return [self._parse_nearby(item) for item in data]

    async def list_home(self) -> list[NearbyPlace]:
        """홈 화면 기준 좌표와 반경으로 주변 장소를 조회합니다."""
        longitude, latitude = self._home
        return await self.list_nearby(longitude, latitude, self._home_max_distance)

    async def get_location(self, location_id: str) -> LocationDetail:
        """장소 상세를 조회합니다."""
        data = await self._get_json(f"{LOCATIONS_PATH}/{location_id}")
        if not isinstance(data, dict):
            raise UpstreamFailureError("Unexpected response from locations API")
        return self._parse_detail(data)

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        client = await self._get_client()

        try:
            response = await client.get(path, params=params)
        except httpx.TimeoutException as e:
            logger.error("Locations API timeout", extra={"path": path})
            raise UpstreamFailureError("Locations API timeout") from e
        except httpx.HTTPError as e:
            logger.error("Locations API request failed", extra={"path": path, "error": str(e)})
            raise UpstreamFailureError("Locations API request failed") from e

        if response.is_redirect:
            logger.error(
                "Locations API redirected",
                extra={"path": path, "location": response.headers.get("location")},
            )
            raise UpstreamFailureError("Locations API redirected")

        if response.status_code == 404:
            raise LocationNotFoundError()

        if not response.is_success:
            logger.error(
                "Locations API HTTP error",
                extra={"path": path, "status_code": response.status_code},
            )
            raise UpstreamFailureError(f"Locations API returned {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamFailureError("Locations API returned invalid JSON") from e

    def _parse_nearby(self, item: Any) -> NearbyPlace:
        try:
            meters = float(item["distance"])
            return NearbyPlace(
                id=str(item["_id"]),
                name=item.get("name", ""),
                address=item.get("address", ""),
                rating=int(item.get("rating", 0)),
                facilities=list(item.get("facilities", [])),
                distance_meters=meters,
                distance=format_distance(meters),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamFailureError("Malformed location entry from locations API") from e

    def _parse_detail(self, data: dict[str, Any]) -> LocationDetail:
        try:
            coordinates = Coordinates.from_pair(data["coords"])
            return LocationDetail(
                id=str(data["_id"]),
                name=data.get("name", ""),
                address=data.get("address", ""),
                rating=int(data.get("rating", 0)),
                facilities=list(data.get("facilities", [])),
                coords={"lng": coordinates.longitude, "lat": coordinates.latitude},
                opening_times=list(data.get("openingTimes", [])),
            )
        except (KeyError, TypeError, ValueError, InvalidCoordinatesError) as e:
            raise UpstreamFailureError("Malformed location detail from locations API") from e

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
