"""Observability Infrastructure."""

from loc8r.infrastructure.observability.tracing import (
    instrument_fastapi,
    instrument_httpx,
    setup_tracing,
    shutdown_tracing,
)

__all__ = [
    "setup_tracing",
    "instrument_fastapi",
    "instrument_httpx",
    "shutdown_tracing",
]
