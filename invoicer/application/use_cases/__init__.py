"""
Application layer use cases.
Business logic for the invoicing backend.
"""

from .base_use_case import *
from .invoice_use_cases import *
from .dashboard_use_cases import *
from .email_use_cases import *
from .settings_use_cases import *
from .user_use_cases import *

__all__ = [
    # Base Use Cases
    "BaseUseCase",
    "PaginatedQueryUseCase",
    "UseCaseResult",
    "CurrentIdentity",

    # Invoice Use Cases
    "CreateInvoiceUseCase",
    "UpdateInvoiceUseCase",
    "ListInvoicesUseCase",
    "GetInvoiceUseCase",

    # Dashboard Use Cases
    "GetDashboardStatsUseCase",

    # Email Use Cases
    "SendInvoiceEmailUseCase",

    # Settings Use Cases
    "GetSettingsUseCase",
    "UpdateSettingsUseCase",

    # User Use Cases
    "GetCurrentUserUseCase",
    "UpdateUserUseCase",
    "SyncAccountUseCase",
]
