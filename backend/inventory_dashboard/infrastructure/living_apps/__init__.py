from .client import LivingAppsClient
from .credentials import AnonymousCredentials, SessionCookieCredentials
from .repositories import (
    CategoryRepository,
    InventoryItemRepository,
    LivingAppsRepository,
    LocationRepository,
)
from .urls import create_record_url, extract_record_id

__all__ = [
    "LivingAppsClient",
    "AnonymousCredentials",
    "SessionCookieCredentials",
    "CategoryRepository",
    "InventoryItemRepository",
    "LivingAppsRepository",
    "LocationRepository",
    "create_record_url",
    "extract_record_id",
]
