"""Initialize database schema for the Loc8r API."""

from __future__ import annotations

import asyncio
import logging
import sys

from sqlalchemy.ext.asyncio import create_async_engine

from loc8r.infrastructure.persistence_postgres.models import Base
from loc8r.setup.config import get_settings
from loc8r.setup.logging import setup_logging

logger = logging.getLogger(__name__)


async def init_db() -> int:
    """Create the locations table if it does not exist."""
    settings = get_settings()
    target = settings.database_url.split("@")[1] if "@" in settings.database_url else "database"
    logger.info("Connecting to database", extra={"target": target})

    engine = create_async_engine(settings.database_url, echo=False)

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database initialization completed", extra={"tables": ["locations"]})
        return 0
    except Exception:  # pragma: no cover - diagnostic output
        logger.exception("Error initializing database")
        return 1
    finally:
        await engine.dispose()


def main() -> None:
    """Entry point for database initialization."""
    setup_logging(get_settings().log_level)
    exit_code = asyncio.run(init_db())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
