"""Location 도메인 예외."""

from loc8r.domain.exceptions.base import DomainError


class LocationNotFoundError(DomainError):
    """장소를 찾을 수 없음."""

    def __init__(self, location_id: object | None = None) -> None:
        self.location_id = location_id
        super().__init__("Location not found")


class InvalidCoordinatesError(DomainError):
    """좌표가 유효하지 않음."""

    def __init__(self, message: str = "Invalid coordinates") -> None:
        super().__init__(message)
