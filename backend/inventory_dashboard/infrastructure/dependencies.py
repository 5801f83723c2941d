"""FastAPI dependency injection — wires infrastructure to application layer.

The dashboard service holds the in-memory snapshots, so it is a process-wide
singleton sharing one HTTP connection pool to the record store.
"""

from functools import lru_cache

import httpx

from inventory_dashboard.config import get_settings
from inventory_dashboard.application.services import DashboardService
from inventory_dashboard.infrastructure.living_apps import (
    CategoryRepository,
    InventoryItemRepository,
    LivingAppsClient,
    LocationRepository,
    SessionCookieCredentials,
)


@lru_cache
def get_record_store() -> LivingAppsClient:
    """Provides the shared Living Apps client."""
    settings = get_settings()
    credentials = SessionCookieCredentials(
        cookie_name=settings.living_apps_session_cookie_name,
        cookie_value=settings.living_apps_session_cookie,
    )
    return LivingAppsClient(
        base_url=settings.living_apps_base_url,
        credentials=credentials,
        http_client=httpx.AsyncClient(timeout=settings.living_apps_timeout),
    )


@lru_cache
def get_dashboard_service() -> DashboardService:
    """Provides the DashboardService with one repository per collection."""
    settings = get_settings()
    store = get_record_store()
    return DashboardService(
        items=InventoryItemRepository(store, settings.inventory_items_app_id),
        categories=CategoryRepository(store, settings.categories_app_id),
        locations=LocationRepository(store, settings.locations_app_id),
        default_min_quantity=settings.default_min_quantity,
    )


async def close_record_store() -> None:
    """Close the shared client and forget the cached singletons."""
    if get_record_store.cache_info().currsize:
        await get_record_store().aclose()
    get_dashboard_service.cache_clear()
    get_record_store.cache_clear()
