"""Liveness endpoint reporting the record store target and snapshot states."""

from fastapi import APIRouter, Depends

from inventory_dashboard.application.services import DashboardService
from inventory_dashboard.config import get_settings
from inventory_dashboard.infrastructure.dependencies import get_dashboard_service

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(
    service: DashboardService = Depends(get_dashboard_service),
) -> dict:
    """Never touches the store; ``collections`` shows the last known load state."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "store": settings.living_apps_base_url,
        "session_configured": bool(settings.living_apps_session_cookie),
        "collections": service.states,
    }
