"""Facilities wire format.

API는 facilities를 쉼표로 구분된 문자열로 주고받지만 내부에서는
순서를 유지한 중복 없는 리스트로 다룹니다.
"""

from __future__ import annotations


def split_facilities(raw: str | None) -> list[str]:
    """'Hot drinks, Food,Premium wifi' -> ['Hot drinks', 'Food', 'Premium wifi']"""
    if not raw:
        return []
    facilities: list[str] = []
    for token in raw.split(","):
        value = token.strip()
        if value and value not in facilities:
            facilities.append(value)
    return facilities
