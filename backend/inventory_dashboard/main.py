"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inventory_dashboard.config import get_settings
from inventory_dashboard.infrastructure.dependencies import (
    close_record_store,
    get_dashboard_service,
)
from inventory_dashboard.infrastructure.logging.log_config import setup_logging
from inventory_dashboard.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: initial load of every collection, then shutdown."""
    setup_logging()

    # Initial load; a failure leaves empty snapshots and is only logged
    service = get_dashboard_service()
    if not await service.refresh():
        logger.warning("Initial load failed; dashboard starts with empty snapshots")

    yield

    # Shutdown
    await close_record_store()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "inventory_dashboard.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
