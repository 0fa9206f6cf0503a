"""Location HTTP Schemas."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from loc8r.application.locations.dto import LocationFields, NearbyLocationDTO
from loc8r.application.locations.services import split_facilities
from loc8r.domain.entities import Location, OpeningTime

Longitude = Annotated[float, Field(ge=-180, le=180, allow_inf_nan=False)]
Latitude = Annotated[float, Field(ge=-90, le=90, allow_inf_nan=False)]


class LocationWriteRequest(BaseModel):
    """장소 생성/수정 요청 스키마.

    facilities는 쉼표로 구분된 문자열, 영업 시간은 위치 기반 필드
    (days1…closed1, days2…closed2)로 받습니다. rating 등 정의되지 않은
    필드는 무시됩니다.
    """

    name: str = ""
    address: str | None = None
    facilities: str | None = None
    lng: Longitude | None = None
    lat: Latitude | None = None

    days1: str | None = None
    opening1: str | None = None
    closing1: str | None = None
    closed1: bool = False
    days2: str | None = None
    opening2: str | None = None
    closing2: str | None = None
    closed2: bool = False

    model_config = ConfigDict(extra="ignore")

    def to_fields(self) -> LocationFields:
        return LocationFields(
            name=self.name,
            address=self.address or "",
            longitude=self.lng,
            latitude=self.lat,
            facilities=split_facilities(self.facilities),
            opening_times=self._opening_times(),
        )

    def _opening_times(self) -> list[OpeningTime]:
        slots = [
            (self.days1, self.opening1, self.closing1, self.closed1),
            (self.days2, self.opening2, self.closing2, self.closed2),
        ]
        # 아무 값도 없는 슬롯은 저장하지 않음
        return [
            OpeningTime(days=days, opening=opening, closing=closing, closed=closed)
            for days, opening, closing, closed in slots
            if days or opening or closing or closed
        ]


class OpeningTimeSchema(BaseModel):
    """영업 시간 슬롯 스키마."""

    days: str | None = None
    opening: str | None = None
    closing: str | None = None
    closed: bool = False


class LocationResponse(BaseModel):
    """장소 응답 스키마. coords는 항상 [lng, lat] 입니다."""

    id: str = Field(alias="_id")
    name: str
    address: str
    rating: int
    facilities: list[str]
    coords: list[float]
    opening_times: list[OpeningTimeSchema] = Field(default_factory=list, alias="openingTimes")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_entity(cls, location: Location) -> LocationResponse:
        return cls(
            id=str(location.id),
            name=location.name,
            address=location.address,
            rating=location.rating,
            facilities=list(location.facilities),
            coords=list(location.coordinates.as_pair()),
            opening_times=[
                OpeningTimeSchema(
                    days=slot.days,
                    opening=slot.opening,
                    closing=slot.closing,
                    closed=slot.closed,
                )
                for slot in location.opening_times
            ],
        )


class NearbyLocationResponse(BaseModel):
    """주변 장소 응답 스키마. distance는 반올림한 미터 문자열입니다."""

    id: str = Field(alias="_id")
    name: str
    address: str
    rating: int
    facilities: list[str]
    distance: str

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_dto(cls, entry: NearbyLocationDTO) -> NearbyLocationResponse:
        return cls(
            id=str(entry.id),
            name=entry.name,
            address=entry.address,
            rating=entry.rating,
            facilities=list(entry.facilities),
            distance=entry.distance,
        )
