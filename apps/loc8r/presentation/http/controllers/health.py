"""Health controller - Health check endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from loc8r.setup.config import Settings, get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(settings: Annotated[Settings, Depends(get_settings)]) -> dict:
    """헬스체크 엔드포인트."""
    return {"status": "healthy", "service": settings.service_name}


@router.get("/ping")
async def ping() -> str:
    """Ping 엔드포인트."""
    return "pong"
