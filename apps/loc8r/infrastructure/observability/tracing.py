"""OpenTelemetry Tracing - Loc8r API.

otel_enabled 설정이 켜진 경우에만 TracerProvider와 자동 계측을 구성합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from loc8r import __version__

if TYPE_CHECKING:
    from fastapi import FastAPI

    from loc8r.setup.config import Settings

logger = logging.getLogger(__name__)

_tracer_provider: Any = None


def setup_tracing(settings: Settings) -> bool:
    """OpenTelemetry 트레이싱 설정.

    Args:
        settings: 서비스 설정

    Returns:
        설정 성공 여부
    """
    global _tracer_provider

    if not settings.otel_enabled:
        logger.info("OpenTelemetry tracing disabled (otel_enabled=false)")
        return False

    try:
        from opentelemetry import trace
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
            OTLPSpanExporter,
        )
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
        from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

        resource = Resource.create(
            {
                "service.name": settings.service_name,
                "service.version": __version__,
                "deployment.environment": settings.environment,
            }
        )

        provider = TracerProvider(
            resource=resource,
            sampler=TraceIdRatioBased(settings.otel_sampling_rate),
        )
        provider.add_span_processor(
            BatchSpanProcessor(
                OTLPSpanExporter(endpoint=settings.otel_exporter_otlp_endpoint, insecure=True),
                max_queue_size=2048,
                max_export_batch_size=512,
                schedule_delay_millis=1000,
            )
        )

        trace.set_tracer_provider(provider)
        _tracer_provider = provider

        logger.info(
            "OpenTelemetry tracing configured",
            extra={
                "service": settings.service_name,
                "endpoint": settings.otel_exporter_otlp_endpoint,
                "sampling_rate": settings.otel_sampling_rate,
            },
        )
        return True

    except Exception as e:
        logger.error(f"Failed to configure tracing: {e}")
        return False


def instrument_fastapi(app: FastAPI, settings: Settings) -> None:
    """FastAPI 자동 계측."""
    if not settings.otel_enabled:
        return

    try:
        from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

        FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ping")
        logger.info("FastAPI instrumentation enabled")

    except Exception as e:
        logger.error(f"Failed to instrument FastAPI: {e}")


def instrument_httpx(settings: Settings) -> None:
    """HTTPX 자동 계측 (Locations API 클라이언트 호출)."""
    if not settings.otel_enabled:
        return

    try:
        from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor

        instrumentor = HTTPXClientInstrumentor()
        if instrumentor.is_instrumented_by_opentelemetry:
            return
        instrumentor.instrument()
        logger.info("HTTPX instrumentation enabled")

    except Exception as e:
        logger.error(f"Failed to instrument HTTPX: {e}")


def shutdown_tracing() -> None:
    """트레이싱 종료. 남은 span을 flush 합니다."""
    global _tracer_provider

    if _tracer_provider is None:
        return
    _tracer_provider.shutdown()
    _tracer_provider = None
