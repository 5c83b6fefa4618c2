"""
Domain services for the invoicing system.
"""

from .dashboard_service import DashboardService
from .email_service import EmailDeliveryChannel, DeliveryResult

__all__ = [
    "DashboardService",
    "EmailDeliveryChannel",
    "DeliveryResult",
]
