"""
Dashboard use cases.
"""

import asyncio
from datetime import date
from typing import Optional

from invoicer.application.use_cases.base_use_case import BaseUseCase, CurrentIdentity
from invoicer.application.dto.base_dto import to_dict
from invoicer.application.dto.dashboard_dto import DashboardStatsResponseDTO
from invoicer.domain.models.dashboard import DashboardStats
from invoicer.domain.models.invoice import InvoiceStatus
from invoicer.domain.repositories.invoice_repository import InvoiceRepository
from invoicer.domain.services.dashboard_service import DashboardService


class GetDashboardStatsUseCase(BaseUseCase[Optional[date], dict]):
    """
    Revenue, counters and chart for the caller's trailing window, plus the
    most recently created invoices overall. The five reads run concurrently.

    The request is an optional "today" override.
    """

    failure_message = "Failed to fetch dashboard stats"

    def __init__(
        self,
        invoice_repository: InvoiceRepository,
        dashboard_service: Optional[DashboardService] = None,
        recent_limit: int = 5
    ):
        super().__init__()
        self.invoice_repository = invoice_repository
        self.dashboard_service = dashboard_service or DashboardService()
        self.recent_limit = recent_limit

    async def _execute_business_logic(self, identity: CurrentIdentity, request: Optional[date]) -> dict:
        since = self.dashboard_service.window_start(request)
        repository = self.invoice_repository

        records, total_invoices, paid_invoices, unpaid_invoices, recent_invoices = await asyncio.gather(
            repository.find_revenue_since(identity.id, since),
            repository.count_since(identity.id, since),
            repository.count_since(identity.id, since, InvoiceStatus.PAID),
            repository.count_since(identity.id, since, InvoiceStatus.UNPAID),
            repository.find_recent(identity.id, self.recent_limit)
        )

        stats = DashboardStats(
            total_revenue=self.dashboard_service.total_revenue(records),
            total_invoices=total_invoices,
            paid_invoices=paid_invoices,
            unpaid_invoices=unpaid_invoices,
            recent_invoices=recent_invoices,
            chart_data=self.dashboard_service.chart_data(records)
        )
        return to_dict(DashboardStatsResponseDTO.from_domain(stats))
