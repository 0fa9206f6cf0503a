"""검증 및 인프라 관련 예외."""

from loc8r.application.common.exceptions.base import ApplicationError


class InvalidArgumentError(ApplicationError):
    """조회 파라미터가 잘못됨 (lng/lat/maxDistance)."""


class LocationValidationError(ApplicationError):
    """생성/수정 요청의 필수 필드가 없거나 형식이 잘못됨."""


class UpstreamFailureError(ApplicationError):
    """저장소 또는 외부 HTTP 호출 실패.

    원인 예외는 로그로만 남기고 클라이언트에는 노출하지 않습니다.
    """

    def __init__(self, message: str = "Upstream failure") -> None:
        super().__init__(message)


class ServiceUnavailableError(ApplicationError):
    """서비스를 사용할 수 없음."""

    def __init__(self) -> None:
        super().__init__("Service not available")
