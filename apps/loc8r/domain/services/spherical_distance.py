"""Spherical distance.

두 (longitude, latitude) 좌표 사이의 대원 거리(great-circle)를 미터로 계산합니다.
"""

from __future__ import annotations

import math

from loc8r.domain.value_objects import Coordinates

# 2dsphere 구면 쿼리가 사용하는 지구 반지름
EARTH_RADIUS_METERS = 6_378_100.0


def great_circle_meters(origin: Coordinates, target: Coordinates) -> float:
    """Haversine 공식으로 두 좌표 간 거리를 미터로 반환합니다."""
    phi1 = math.radians(origin.latitude)
    phi2 = math.radians(target.latitude)
    d_phi = math.radians(target.latitude - origin.latitude)
    d_lambda = math.radians(target.longitude - origin.longitude)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # 부동소수점 오차로 1을 넘는 경우 방지
    a = min(1.0, a)
    return EARTH_RADIUS_METERS * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
