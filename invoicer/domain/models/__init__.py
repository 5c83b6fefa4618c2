"""
Domain models module.
Contains the entities, value objects and exceptions of the invoicing domain.
"""

from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    EntityNotFoundError,
    UnauthorizedError,
)
from .invoice import (
    Invoice,
    Address,
    LineItem,
    InvoiceStatus,
    DEFAULT_CURRENCY,
)
from .settings import AccountSettings, Signature
from .user import Account, UserRole
from .dashboard import RevenueRecord, ChartPoint, DashboardStats

__all__ = [
    # Base
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "UnauthorizedError",

    # Invoice
    "Invoice",
    "Address",
    "LineItem",
    "InvoiceStatus",
    "DEFAULT_CURRENCY",

    # Settings
    "AccountSettings",
    "Signature",

    # Account
    "Account",
    "UserRole",

    # Dashboard
    "RevenueRecord",
    "ChartPoint",
    "DashboardStats",
]
