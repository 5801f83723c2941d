import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Inventory Dashboard API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Living Apps record store
    living_apps_base_url: str = "https://my.living-apps.de/rest"
    living_apps_session_cookie_name: str = "session"
    living_apps_session_cookie: str = ""
    living_apps_timeout: float | None = None  # seconds, None waits indefinitely

    # Collection (app) identifiers, fixed per deployment
    inventory_items_app_id: str = "698494eea42675c0592289b9"
    categories_app_id: str = "698494eea42675c0592289ba"
    locations_app_id: str = "698494eea42675c0592289bb"

    # Form defaults
    default_min_quantity: int = 10

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_living_apps: str = "INFO"      # record client + dashboard service

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Normalize the base URL and warn about an unauthenticated setup."""
        object.__setattr__(self, "living_apps_base_url", self.living_apps_base_url.rstrip("/"))
        if not self.living_apps_session_cookie:
            _config_logger.warning(
                "LIVING_APPS_SESSION_COOKIE is not set; requests will be sent without a session"
            )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
