"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
내부 오류 내용은 로그에만 남기고 응답에는 일반 메시지만 담습니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from loc8r.application.common.exceptions.base import ApplicationError
from loc8r.application.common.exceptions.validation import (
    InvalidArgumentError,
    LocationValidationError,
    ServiceUnavailableError,
    UpstreamFailureError,
)
from loc8r.domain.exceptions.base import DomainError
from loc8r.domain.exceptions.location import InvalidCoordinatesError, LocationNotFoundError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_ARGUMENT"},
        )

    @app.exception_handler(LocationValidationError)
    async def location_validation_handler(request: Request, exc: LocationValidationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "VALIDATION_ERROR"},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return JSONResponse(
            status_code=400,
            content={"detail": message, "code": "VALIDATION_ERROR"},
        )

    @app.exception_handler(InvalidCoordinatesError)
    async def invalid_coordinates_handler(request: Request, exc: InvalidCoordinatesError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_ARGUMENT"},
        )

    @app.exception_handler(LocationNotFoundError)
    async def location_not_found_handler(request: Request, exc: LocationNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "LOCATION_NOT_FOUND"},
        )

    @app.exception_handler(ServiceUnavailableError)
    async def service_unavailable_handler(request: Request, exc: ServiceUnavailableError):
        return JSONResponse(
            status_code=503,
            content={"detail": exc.message, "code": "SERVICE_UNAVAILABLE"},
        )

    @app.exception_handler(UpstreamFailureError)
    async def upstream_failure_handler(request: Request, exc: UpstreamFailureError):
        logger.error(
            "Upstream failure",
            extra={"path": request.url.path, "error": exc.message},
        )
        return JSONResponse(
            status_code=500,
            content={"detail": INTERNAL_ERROR_MESSAGE, "code": "INTERNAL_ERROR"},
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "DOMAIN_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled error",
            extra={"path": request.url.path, "error_type": type(exc).__name__},
        )
        return JSONResponse(
            status_code=500,
            content={"detail": INTERNAL_ERROR_MESSAGE, "code": "INTERNAL_ERROR"},
        )
