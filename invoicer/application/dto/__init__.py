"""
Application layer DTOs.
Data Transfer Objects for API requests and responses.
"""

from .base_dto import *
from .invoice_dto import *
from .dashboard_dto import *
from .settings_dto import *
from .user_dto import *
from .email_dto import *

__all__ = [
    # Base DTOs
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "TimestampMixin",
    "PaginationDTO",

    # Invoice DTOs
    "AddressDTO",
    "LineItemDTO",
    "InvoiceFormDTO",
    "CreateInvoiceRequestDTO",
    "UpdateInvoiceRequestDTO",
    "GetInvoiceRequestDTO",
    "ListInvoicesRequestDTO",
    "AddressResponseDTO",
    "LineItemResponseDTO",
    "InvoiceSummaryResponseDTO",
    "InvoiceResponseDTO",

    # Dashboard DTOs
    "ChartPointDTO",
    "DashboardStatsResponseDTO",

    # Settings DTOs
    "SignatureDTO",
    "UpdateSettingsRequestDTO",
    "SignatureResponseDTO",
    "SettingsResponseDTO",

    # User DTOs
    "UpdateUserRequestDTO",
    "UserResponseDTO",

    # Email DTOs
    "SendInvoiceEmailRequestDTO",
]
