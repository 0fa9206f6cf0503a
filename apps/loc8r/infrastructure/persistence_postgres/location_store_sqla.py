"""SQLAlchemy Location Store Implementation."""

from __future__ import annotations

import logging
import math
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator
from uuid import UUID

from sqlalchemy import case, delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from loc8r.application.common.exceptions import UpstreamFailureError
from loc8r.application.locations.ports import LocationStore
from loc8r.domain.entities import Location, OpeningTime
from loc8r.domain.services import EARTH_RADIUS_METERS
from loc8r.domain.value_objects import Coordinates
from loc8r.infrastructure.persistence_postgres.models import LocationRow

logger = logging.getLogger(__name__)


class SqlaLocationStore(LocationStore):
    """SQLAlchemy 기반 장소 저장소.

    LocationStore Port를 구현합니다. 각 연산은 독립된 세션에서 실행되고
    성공 시 커밋됩니다.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        async with self._session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.error(
                    "Location store operation failed",
                    extra={"operation": operation, "error": str(exc)},
                )
                raise UpstreamFailureError(f"Location store {operation} failed") from exc

    async def add(self, location: Location) -> Location:
        async with self._session("add") as session:
            row = LocationRow(id=location.id, created_at=location.created_at, rating=location.rating)
            for key, value in self._to_values(location).items():
                setattr(row, key, value)
            session.add(row)
            await session.commit()
            return self._to_domain(row)

    async def get_by_id(self, location_id: UUID) -> Location | None:
        async with self._session("get_by_id") as session:
            row = await session.get(LocationRow, location_id)
            if row is None:
                return None
            return self._to_domain(row)

    async def save(self, location: Location) -> Location | None:
        """rating을 제외한 필드만 UPDATE 합니다."""
        async with self._session("save") as session:
            result = await session.execute(
                update(LocationRow)
                .where(LocationRow.id == location.id)
                .values(**self._to_values(location))
            )
            if result.rowcount == 0:
                await session.rollback()
                return None
            await session.commit()
            row = await session.get(LocationRow, location.id, populate_existing=True)
            if row is None:
                return None
            return self._to_domain(row)

    async def delete(self, location_id: UUID) -> bool:
        async with self._session("delete") as session:
            result = await session.execute(delete(LocationRow).where(LocationRow.id == location_id))
            await session.commit()
            return result.rowcount > 0

    async def list_all(self) -> list[Location]:
        async with self._session("list_all") as session:
            result = await session.execute(
                select(LocationRow).order_by(LocationRow.created_at.asc(), LocationRow.id.asc())
            )
            return [self._to_domain(row) for row in result.scalars().all()]

    async def find_nearest(
        self,
        point: Coordinates,
        max_distance: float,
    ) -> list[tuple[Location, float]]:
        """거리 계산, 필터링, 정렬을 모두 SQL에서 수행합니다."""
        distance_expr = self._haversine_expr(point)
        async with self._session("find_nearest") as session:
            result = await session.execute(
                select(LocationRow, distance_expr)
                .where(distance_expr <= max_distance)
                .order_by(
                    distance_expr.asc(),
                    LocationRow.created_at.asc(),
                    LocationRow.id.asc(),
                )
            )
            return [(self._to_domain(row), float(distance)) for row, distance in result.all()]

    @staticmethod
    def _haversine_expr(point: Coordinates):
        """Haversine 거리(미터) 표현식."""
        origin_lat = math.radians(point.latitude)
        row_lat = func.radians(LocationRow.latitude)
        half_d_phi = func.sin((row_lat - origin_lat) / 2.0)
        half_d_lambda = func.sin(
            (func.radians(LocationRow.longitude) - math.radians(point.longitude)) / 2.0
        )
        a = half_d_phi * half_d_phi + math.cos(origin_lat) * func.cos(row_lat) * (
            half_d_lambda * half_d_lambda
        )
        # 부동소수점 오차로 1을 넘으면 asin 도메인 오류
        clamped = case((a > 1.0, 1.0), else_=a)
        return (2.0 * EARTH_RADIUS_METERS * func.asin(func.sqrt(clamped))).label("distance_m")

    @staticmethod
    def _to_values(location: Location) -> dict[str, Any]:
        """rating/id/created_at을 제외한 덮어쓰기 대상 컬럼 값."""
        longitude, latitude = location.coordinates.as_pair()
        return {
            "name": location.name,
            "address": location.address,
            "longitude": longitude,
            "latitude": latitude,
            "facilities": list(location.facilities),
            "opening_times": [
                {
                    "days": slot.days,
                    "opening": slot.opening,
                    "closing": slot.closing,
                    "closed": slot.closed,
                }
                for slot in location.opening_times
            ],
        }

    @staticmethod
    def _to_domain(row: LocationRow) -> Location:
        """ORM 모델을 도메인 엔티티로 변환합니다."""
        return Location(
            id=row.id,
            name=row.name or "",
            address=row.address,
            coordinates=Coordinates.from_pair((row.longitude, row.latitude)),
            facilities=list(row.facilities or []),
            opening_times=[
                OpeningTime(
                    days=slot.get("days"),
                    opening=slot.get("opening"),
                    closing=slot.get("closing"),
                    closed=bool(slot.get("closed", False)),
                )
                for slot in (row.opening_times or [])
            ],
            rating=row.rating or 0,
            created_at=row.created_at,
        )
