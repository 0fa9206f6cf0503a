"""Integration test fixtures using testcontainers.

실제 PostgreSQL 컨테이너를 사용합니다. Docker가 실행 중이어야 하며,
LOC8R_TEST_DATABASE_URL이 설정되어 있으면 해당 DB를 대신 사용합니다.
"""

from __future__ import annotations

import os
from typing import AsyncIterator, Iterator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from loc8r.infrastructure.persistence_postgres import Base, SqlaLocationStore
from loc8r.setup.database import build_location_store


@pytest.fixture(scope="session")
def database_url() -> Iterator[str]:
    """비동기 DB URL. 외부 DB가 없으면 PostgreSQL 컨테이너를 띄웁니다."""
    external = os.getenv("LOC8R_TEST_DATABASE_URL")
    if external:
        yield external
        return

    pytest.importorskip("testcontainers")
    from testcontainers.postgres import PostgresContainer

    try:
        container = PostgresContainer("postgres:15-alpine")
        container.start()
    except Exception as exc:  # Docker 미실행
        pytest.skip(f"PostgreSQL container unavailable: {exc}")

    try:
        # postgresql+psycopg2://... → postgresql+asyncpg://...
        sync_url = container.get_connection_url()
        yield "postgresql+asyncpg://" + sync_url.split("://", 1)[1]
    finally:
        container.stop()


@pytest.fixture
async def engine(database_url: str) -> AsyncIterator[AsyncEngine]:
    """테스트마다 locations 테이블을 새로 만듭니다."""
    engine = create_async_engine(database_url, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def sqla_store(engine: AsyncEngine) -> SqlaLocationStore:
    return build_location_store(engine)
