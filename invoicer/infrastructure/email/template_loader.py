"""
Email template loader and renderer.
Handles Jinja2 templates for invoice notifications.
"""

import logging
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

logger = logging.getLogger(__name__)


CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
    "CAD": "CA$",
    "AUD": "A$",
    "NZD": "NZ$",
    "MXN": "MX$",
    "BRL": "R$",
    "CNY": "CN¥",
    "KRW": "₩",
}

ZERO_DECIMAL_CURRENCIES = {"JPY", "KRW", "CLP", "VND", "ISK"}


def format_currency(value: Any, currency: str = "USD") -> str:
    """
    Format an amount in US English style: ``$1,234.50``, ``€99.00``, ``¥1,235``.
    Currencies without a known symbol are prefixed with their code and a
    no-break space: ``CHF\u00a010.00``.
    """
    code = (currency or "USD").upper()
    places = 0 if code in ZERO_DECIMAL_CURRENCIES else 2
    amount = Decimal(str(value)).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)

    sign = "-" if amount < 0 else ""
    digits = f"{abs(amount):,.{places}f}"

    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{sign}{code}\u00a0{digits}"
    return f"{sign}{symbol}{digits}"


ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return f"{day}th"
    return f"{day}{ORDINAL_SUFFIXES.get(day % 10, 'th')}"


def format_long_date(value: Any) -> str:
    """``2026-10-19`` -> ``October 19th, 2026``."""
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    elif isinstance(value, datetime):
        value = value.date()
    return f"{value.strftime('%B')} {ordinal(value.day)}, {value.year}"


class EmailTemplateLoader:
    """Loads and renders email templates using Jinja2."""

    def __init__(self, templates_dir: Path = None):
        """Initialize template loader with email templates directory."""
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"

        # Create Jinja2 environment
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined
        )

        # Register custom filters
        self.env.filters["currency"] = format_currency
        self.env.filters["long_date"] = format_long_date

    async def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render email template with context.

        Args:
            template_name: Name of template file (e.g., 'send_invoice.html')
            context: Template context variables

        Returns:
            Rendered template content
        """
        enhanced_context = {
            **context,
            "current_year": datetime.now().year,
        }

        template = self.env.get_template(template_name)
        rendered = template.render(**enhanced_context)

        logger.debug(f"Successfully rendered template: {template_name}")
        return rendered

