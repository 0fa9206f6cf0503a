"""Location Fields Validator.

생성/수정 요청의 필수 필드(address, coordinates)를 검증합니다.
"""

from __future__ import annotations

from loc8r.application.common.exceptions import LocationValidationError
from loc8r.application.locations.constants import OPENING_TIME_SLOTS
from loc8r.application.locations.dto.location_fields import LocationFields
from loc8r.domain.exceptions import InvalidCoordinatesError
from loc8r.domain.value_objects import Coordinates


class LocationFieldsValidator:
    """LocationFields 검증 서비스."""

    @staticmethod
    def validate(fields: LocationFields) -> Coordinates:
        """필드를 검증하고 좌표 Value Object를 반환합니다.

        Raises:
            LocationValidationError: address가 비었거나 좌표가 없거나 잘못됨
        """
        if not fields.address or not fields.address.strip():
            raise LocationValidationError("Location address is required")
        if fields.longitude is None or fields.latitude is None:
            raise LocationValidationError("Location coordinates (lng, lat) are required")
        if len(fields.opening_times) > OPENING_TIME_SLOTS:
            raise LocationValidationError(
                f"At most {OPENING_TIME_SLOTS} opening time slots are supported"
            )
        try:
            return Coordinates(longitude=fields.longitude, latitude=fields.latitude)
        except InvalidCoordinatesError as exc:
            raise LocationValidationError(exc.message) from exc
