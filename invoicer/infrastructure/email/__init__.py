"""
Email infrastructure: template rendering and delivery.
"""

from .template_loader import EmailTemplateLoader, format_currency, format_long_date
from .resend_client import ResendEmailChannel, get_email_channel

__all__ = [
    "EmailTemplateLoader",
    "format_currency",
    "format_long_date",
    "ResendEmailChannel",
    "get_email_channel",
]
