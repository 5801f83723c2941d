"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from inventory_dashboard.presentation.api.v1.endpoints.health import router as health_router
from inventory_dashboard.presentation.api.v1.endpoints.dashboard import router as dashboard_router
from inventory_dashboard.presentation.api.v1.endpoints.inventory_items import router as inventory_items_router
from inventory_dashboard.presentation.api.v1.endpoints.categories import router as categories_router
from inventory_dashboard.presentation.api.v1.endpoints.locations import router as locations_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(dashboard_router)
router.include_router(inventory_items_router)
router.include_router(categories_router)
router.include_router(locations_router)
