"""Application Exceptions."""

from loc8r.application.common.exceptions.base import ApplicationError
from loc8r.application.common.exceptions.validation import (
    InvalidArgumentError,
    LocationValidationError,
    ServiceUnavailableError,
    UpstreamFailureError,
)

__all__ = [
    "ApplicationError",
    "InvalidArgumentError",
    "LocationValidationError",
    "ServiceUnavailableError",
    "UpstreamFailureError",
]
