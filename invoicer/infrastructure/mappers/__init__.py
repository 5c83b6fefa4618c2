"""
Infrastructure mappers module.
Contains mappers for converting between domain entities and database models.
"""

from .invoice_mapper import InvoiceMapper
from .settings_mapper import SettingsMapper
from .user_mapper import UserMapper

__all__ = [
    "InvoiceMapper",
    "SettingsMapper",
    "UserMapper",
]
