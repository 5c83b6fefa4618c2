"""
Dashboard DTOs.
"""

from typing import List
from pydantic import Field

from invoicer.domain.models.dashboard import ChartPoint, DashboardStats
from .base_dto import BaseDTO, money
from .invoice_dto import InvoiceSummaryResponseDTO


class ChartPointDTO(BaseDTO):
    date: str = Field(description="ISO calendar day")
    total_revenue: float
    paid_revenue: float

    @classmethod
    def from_domain(cls, point: ChartPoint) -> "ChartPointDTO":
        return cls(
            date=point.date,
            total_revenue=money(point.total_revenue),
            paid_revenue=money(point.paid_revenue)
        )


class DashboardStatsResponseDTO(BaseDTO):
    """Summary of the trailing dashboard window."""

    total_revenue: float = Field(description="Sum of window totals, any status")
    total_invoices: int = Field(description="Invoices in the window")
    paid_invoices: int = Field(description="PAID invoices in the window")
    unpaid_invoices: int = Field(description="UNPAID invoices in the window")
    recent_invoices: List[InvoiceSummaryResponseDTO] = Field(default_factory=list)
    chart_data: List[ChartPointDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, stats: DashboardStats) -> "DashboardStatsResponseDTO":
        return cls(
            total_revenue=money(stats.total_revenue),
            total_invoices=stats.total_invoices,
            paid_invoices=stats.paid_invoices,
            unpaid_invoices=stats.unpaid_invoices,
            recent_invoices=[InvoiceSummaryResponseDTO.from_domain(i) for i in stats.recent_invoices],
            chart_data=[ChartPointDTO.from_domain(p) for p in stats.chart_data]
        )
