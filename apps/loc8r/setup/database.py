"""Database Setup.

엔진과 저장소는 애플리케이션 시작 시 명시적으로 생성되어 주입됩니다.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from loc8r.infrastructure.persistence_postgres import SqlaLocationStore
from loc8r.setup.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """SQLAlchemy 비동기 엔진을 생성합니다."""
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_pre_ping=True,
    )


def build_location_store(engine: AsyncEngine) -> SqlaLocationStore:
    """엔진에 바인딩된 LocationStore를 생성합니다."""
    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    return SqlaLocationStore(session_factory)
