"""Loc8r Infrastructure Layer."""

from loc8r.infrastructure.persistence_postgres import (
    Base,
    LocationRow,
    SqlaLocationStore,
)

__all__ = ["SqlaLocationStore", "Base", "LocationRow"]
