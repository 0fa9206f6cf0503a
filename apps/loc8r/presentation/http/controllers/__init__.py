"""HTTP Controllers."""

from loc8r.presentation.http.controllers.health import router as health_router
from loc8r.presentation.http.controllers.locations import router as locations_router

__all__ = ["health_router", "locations_router"]
