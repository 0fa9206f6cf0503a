"""Setup Module."""

from loc8r.setup.config import Settings, get_settings
from loc8r.setup.database import build_location_store, create_engine
from loc8r.setup.logging import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "build_location_store",
    "create_engine",
    "setup_logging",
]
