"""
Dashboard read models.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List

from invoicer.domain.models.invoice import Invoice, InvoiceStatus


@dataclass(frozen=True)
class RevenueRecord:
    """Projection of one invoice inside the dashboard window."""

    invoice_date: date
    total: Decimal
    status: InvoiceStatus


@dataclass(frozen=True)
class ChartPoint:
    """One point of the revenue chart."""

    date: str
    total_revenue: Decimal
    paid_revenue: Decimal


@dataclass
class DashboardStats:
    """Summary of an account's trailing window."""

    total_revenue: Decimal
    total_invoices: int
    paid_invoices: int
    unpaid_invoices: int
    recent_invoices: List[Invoice] = field(default_factory=list)
    chart_data: List[ChartPoint] = field(default_factory=list)
