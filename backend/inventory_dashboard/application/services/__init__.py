from .dashboard_service import DashboardService
from .single_flight import SingleFlight

__all__ = [
    "DashboardService",
    "SingleFlight",
]
