"""Locations Controller."""

from __future__ import annotations

import math
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, Response, status

from loc8r.application.common.exceptions import InvalidArgumentError
from loc8r.application.locations import (
    CreateLocationCommand,
    DeleteLocationCommand,
    GetLocationQuery,
    GetNearbyLocationsQuery,
    NearbyRequest,
    UpdateLocationCommand,
)
from loc8r.domain.exceptions import LocationNotFoundError
from loc8r.presentation.http.schemas import (
    LocationResponse,
    LocationWriteRequest,
    NearbyLocationResponse,
)
from loc8r.setup.config import Settings, get_settings
from loc8r.setup.dependencies import (
    get_create_location_command,
    get_delete_location_command,
    get_location_query,
    get_nearby_locations_query,
    get_update_location_command,
)

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get(
    "",
    response_model=list[NearbyLocationResponse],
    summary="List locations by distance",
)
async def list_by_distance(
    query: Annotated[GetNearbyLocationsQuery, Depends(get_nearby_locations_query)],
    settings: Annotated[Settings, Depends(get_settings)],
    lng: str | None = Query(None, description="기준 경도"),
    lat: str | None = Query(None, description="기준 위도"),
    max_distance: str | None = Query(
        None,
        alias="maxDistance",
        description="최대 거리 (미터). 생략 시 사실상 무제한",
    ),
) -> list[NearbyLocationResponse]:
    """기준 좌표에서 가까운 순으로 장소를 조회합니다."""
    longitude = _parse_float_param("lng", lng)
    latitude = _parse_float_param("lat", lat)
    if longitude is None or latitude is None:
        raise InvalidArgumentError("Valid 'lng' and 'lat' query parameters are required")

    limit = _parse_float_param("maxDistance", max_distance)
    request = NearbyRequest(
        longitude=longitude,
        latitude=latitude,
        max_distance=settings.default_max_distance_meters if limit is None else limit,
    )

    entries = await query.execute(request)
    return [NearbyLocationResponse.from_dto(e) for e in entries]


@router.post(
    "",
    response_model=LocationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create location",
)
async def create_location(
    command: Annotated[CreateLocationCommand, Depends(get_create_location_command)],
    payload: Annotated[LocationWriteRequest, Body()],
) -> LocationResponse:
    """장소를 생성합니다."""
    location = await command.execute(payload.to_fields())
    return LocationResponse.from_entity(location)


@router.get("/{location_id}", response_model=LocationResponse, summary="Get location")
async def read_location(
    location_id: str,
    query: Annotated[GetLocationQuery, Depends(get_location_query)],
) -> LocationResponse:
    """장소 상세를 조회합니다."""
    location = await query.execute(_parse_location_id(location_id))
    return LocationResponse.from_entity(location)


@router.put("/{location_id}", response_model=LocationResponse, summary="Update location")
async def update_location(
    location_id: str,
    command: Annotated[UpdateLocationCommand, Depends(get_update_location_command)],
    payload: Annotated[LocationWriteRequest, Body()],
) -> LocationResponse:
    """장소를 수정합니다. rating은 변경되지 않습니다."""
    location = await command.execute(_parse_location_id(location_id), payload.to_fields())
    return LocationResponse.from_entity(location)


@router.delete(
    "/{location_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete location",
)
async def delete_location(
    location_id: str,
    command: Annotated[DeleteLocationCommand, Depends(get_delete_location_command)],
) -> Response:
    """장소를 삭제합니다."""
    await command.execute(_parse_location_id(location_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _parse_float_param(name: str, raw: str | None) -> float | None:
    """숫자 쿼리 파라미터를 파싱합니다. 비어 있으면 None."""
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise InvalidArgumentError(f"Query parameter '{name}' must be a number")
    if not math.isfinite(value):
        raise InvalidArgumentError(f"Query parameter '{name}' must be finite")
    return value


def _parse_location_id(raw: str) -> UUID:
    """경로의 location id를 파싱합니다. 형식이 잘못된 id는 존재하지 않는 것으로 취급합니다."""
    try:
        return UUID(raw)
    except ValueError:
        raise LocationNotFoundError()
