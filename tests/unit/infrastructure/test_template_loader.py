"""
Unit tests for email template rendering and its filters.
"""

import pytest
from decimal import Decimal
from datetime import date, datetime

from jinja2 import UndefinedError

from invoicer.infrastructure.email.template_loader import (
    EmailTemplateLoader,
    format_currency,
    format_long_date,
    ordinal,
)


class TestFormatCurrency:

    @pytest.mark.parametrize("value,currency,expected", [
        (Decimal("1234.5"), "USD", "$1,234.50"),
        (99, "EUR", "€99.00"),
        (Decimal("1234.5"), "JPY", "¥1,235"),
        (Decimal("0.005"), "GBP", "£0.01"),
        (Decimal("-12"), "USD", "-$12.00"),
        (Decimal("10"), "CHF", "CHF\u00a010.00"),
        (20.0, "usd", "$20.00"),
    ])
    def test_format(self, value, currency, expected):
        assert format_currency(value, currency) == expected


class TestLongDate:

    @pytest.mark.parametrize("day,expected", [
        (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
        (11, "11th"), (12, "12th"), (13, "13th"),
        (21, "21st"), (22, "22nd"), (23, "23rd"), (31, "31st"),
    ])
    def test_ordinal(self, day, expected):
        assert ordinal(day) == expected

    def test_date(self):
        assert format_long_date(date(2026, 10, 19)) == "October 19th, 2026"

    def test_datetime_and_string(self):
        assert format_long_date(datetime(2026, 1, 1, 8, 30)) == "January 1st, 2026"
        assert format_long_date("2026-03-02") == "March 2nd, 2026"


class TestEmailTemplateLoader:
    """Test cases for EmailTemplateLoader."""

    def setup_method(self):
        self.loader = EmailTemplateLoader()

    async def test_render_invoice(self):
        html = await self.loader.render_template("send_invoice.html", {
            "first_name": "Jane <Client>",
            "invoice_no": "INV-001",
            "due_date": date(2026, 11, 2),
            "total": Decimal("1234.5"),
            "currency": "USD",
            "invoice_url": "http://localhost:3000/invoice/paid/abc",
        })

        assert "Jane &lt;Client&gt;" in html
        assert "#INV-001" in html
        assert "November 2nd, 2026" in html
        assert "$1,234.50" in html
        assert 'href="http://localhost:3000/invoice/paid/abc"' in html
        assert str(datetime.now().year) in html

    async def test_missing_variable_fails(self):
        with pytest.raises(UndefinedError):
            await self.loader.render_template("send_invoice.html", {"first_name": "Jane"})
