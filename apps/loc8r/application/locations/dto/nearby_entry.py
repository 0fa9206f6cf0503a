"""Nearby Location DTO."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass
class NearbyLocationDTO:
    """주변 장소 응답 DTO."""

    id: UUID
    name: str
    address: str
    rating: int
    facilities: list[str]
    distance: str
