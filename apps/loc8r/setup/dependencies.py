"""Dependency Injection for FastAPI.

LocationStore는 create_app() 또는 lifespan에서 app.state에 주입되며,
각 Query/Command는 요청마다 그 인스턴스로 생성됩니다.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from loc8r.application.common.exceptions import ServiceUnavailableError
from loc8r.application.locations import (
    CreateLocationCommand,
    DeleteLocationCommand,
    GetLocationQuery,
    GetNearbyLocationsQuery,
    LocationStore,
    UpdateLocationCommand,
)


def get_location_store(request: Request) -> LocationStore:
    """애플리케이션에 주입된 LocationStore를 반환합니다."""
    store = getattr(request.app.state, "location_store", None)
    if store is None:
        raise ServiceUnavailableError()
    return store


StoreDep = Annotated[LocationStore, Depends(get_location_store)]


# Queries
def get_nearby_locations_query(store: StoreDep) -> GetNearbyLocationsQuery:
    return GetNearbyLocationsQuery(store)


def get_location_query(store: StoreDep) -> GetLocationQuery:
    return GetLocationQuery(store)


# Commands
def get_create_location_command(store: StoreDep) -> CreateLocationCommand:
    return CreateLocationCommand(store)


def get_update_location_command(store: StoreDep) -> UpdateLocationCommand:
    return UpdateLocationCommand(store)


def get_delete_location_command(store: StoreDep) -> DeleteLocationCommand:
    return DeleteLocationCommand(store)
