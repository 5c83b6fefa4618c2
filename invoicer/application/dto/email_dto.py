"""
Invoice email DTOs.
"""

from typing import Optional
from pydantic import Field

from .base_dto import RequestDTO


class SendInvoiceEmailRequestDTO(RequestDTO):
    """Send an invoice to its recipient. ``invoice_id`` comes from the path."""

    subject: str = Field(min_length=1, max_length=255, description="Email subject")
    invoice_id: Optional[str] = Field(default=None, description="Invoice ID")
