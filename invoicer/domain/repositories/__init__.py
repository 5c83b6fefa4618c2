"""
Domain repository interfaces.
"""

from .invoice_repository import InvoiceRepository
from .settings_repository import SettingsRepository
from .user_repository import UserRepository

__all__ = [
    "InvoiceRepository",
    "SettingsRepository",
    "UserRepository",
]
