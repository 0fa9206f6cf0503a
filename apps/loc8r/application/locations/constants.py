"""Locations constants."""

# "거리 제한 없음"을 뜻하는 기본 maxDistance (미터)
DEFAULT_MAX_DISTANCE_METERS = 2_000_000_000_000.0

# 영업 시간 슬롯 수 (days1..closed1, days2..closed2)
OPENING_TIME_SLOTS = 2
