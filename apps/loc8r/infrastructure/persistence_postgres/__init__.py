"""PostgreSQL Infrastructure."""

from loc8r.infrastructure.persistence_postgres.location_store_sqla import SqlaLocationStore
from loc8r.infrastructure.persistence_postgres.models import Base, LocationRow

__all__ = ["SqlaLocationStore", "Base", "LocationRow"]
