"""Loc8r API - FastAPI application entry point.

LocationStore는 create_app()에 직접 전달하거나, 전달하지 않으면
lifespan에서 설정 기반으로 생성해 app.state에 주입합니다.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from loc8r import __version__
from loc8r.application.locations.ports import LocationStore
from loc8r.infrastructure.observability import (
    instrument_fastapi,
    setup_tracing,
    shutdown_tracing,
)
from loc8r.presentation.http.controllers import health_router, locations_router
from loc8r.presentation.http.errors import register_exception_handlers
from loc8r.setup import build_location_store, create_engine, get_settings, setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    setup_logging(settings.log_level)
    logger.info(f"Starting {settings.service_name}")

    # OpenTelemetry 설정
    if settings.otel_enabled:
        setup_tracing(settings)

    engine = None
    if app.state.location_store is None:
        engine = create_engine(settings)
        app.state.location_store = build_location_store(engine)
        logger.info("Location store initialized", extra={"backend": "postgresql"})

    yield

    logger.info(f"Shutting down {settings.service_name}")
    if engine is not None:
        await engine.dispose()
        app.state.location_store = None
    shutdown_tracing()


def create_app(store: LocationStore | None = None) -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다.

    Args:
        store: 주입할 LocationStore. None이면 시작 시 PostgreSQL 저장소를 생성합니다.
    """
    app = FastAPI(
        title="Loc8r API",
        description="Locations CRUD and nearest-location search",
        version=__version__,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )
    app.state.location_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # OpenTelemetry FastAPI instrumentation
    if settings.otel_enabled:
        instrument_fastapi(app, settings)

    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(locations_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "loc8r.main:app",
        host="0.0.0.0",
        port=3000,
        reload=settings.environment == "development",
    )
