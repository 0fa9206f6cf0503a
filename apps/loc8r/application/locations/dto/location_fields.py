"""Location Fields DTO."""

from __future__ import annotations

from dataclasses import dataclass, field

from loc8r.domain.entities import OpeningTime


@dataclass
class LocationFields:
    """생성/수정 요청 DTO.

    facilities는 이미 분리된 컬렉션입니다. rating은 포함하지 않습니다.
    """

    name: str
    address: str
    longitude: float | None
    latitude: float | None
    facilities: list[str] = field(default_factory=list)
    opening_times: list[OpeningTime] = field(default_factory=list)
