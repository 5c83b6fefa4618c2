"""
Infrastructure repositories module.
SQLAlchemy implementations of the domain repository interfaces.
"""

from .invoice_repository import SQLAlchemyInvoiceRepository
from .settings_repository import SQLAlchemySettingsRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyInvoiceRepository",
    "SQLAlchemySettingsRepository",
    "SQLAlchemyUserRepository",
]
