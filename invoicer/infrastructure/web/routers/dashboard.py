"""
Dashboard router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from invoicer.config import Settings, get_settings
from invoicer.application.use_cases.dashboard_use_cases import GetDashboardStatsUseCase
from invoicer.domain.repositories.invoice_repository import InvoiceRepository
from invoicer.domain.services.dashboard_service import DashboardService
from invoicer.infrastructure.auth.dependencies import AuthenticatedIdentityDep
from invoicer.infrastructure.web.responses import envelope_response
from invoicer.infrastructure.web.routers.invoices import get_invoice_repository


router = APIRouter()


def get_dashboard_service(settings: Annotated[Settings, Depends(get_settings)]) -> DashboardService:
    """Dependency to get the dashboard service configured from settings."""
    return DashboardService(
        window_days=settings.dashboard_window_days,
        merge_by_day=settings.dashboard_merge_chart_by_day
    )


@router.get("/stats")
async def get_dashboard_stats(
    identity: AuthenticatedIdentityDep,
    repository: Annotated[InvoiceRepository, Depends(get_invoice_repository)],
    dashboard_service: Annotated[DashboardService, Depends(get_dashboard_service)],
    settings: Annotated[Settings, Depends(get_settings)]
):
    """
    Revenue, invoice counters and chart for the last 30 days,
    plus the most recently created invoices.
    """
    use_case = GetDashboardStatsUseCase(
        repository,
        dashboard_service=dashboard_service,
        recent_limit=settings.recent_invoices_limit
    )
    result = await use_case.execute(identity)
    return envelope_response(result)
