"""
Integration tests for the dashboard statistics use case.
"""

from datetime import date, timedelta

from invoicer.application.use_cases.dashboard_use_cases import GetDashboardStatsUseCase
from invoicer.application.use_cases.invoice_use_cases import CreateInvoiceUseCase
from invoicer.domain.services.dashboard_service import DashboardService


TODAY = date(2026, 10, 19)


def dated(days_ago: int, total: float, status: str = "UNPAID") -> dict:
    invoice_date = TODAY - timedelta(days=days_ago)
    return dict(
        invoice_date=invoice_date.isoformat(),
        due_date=(invoice_date + timedelta(days=14)).isoformat(),
        items=[{"item_name": "Work", "quantity": 1, "price": total, "total": total}],
        sub_total=total,
        total=total,
        status=status,
    )


class TestDashboardStats:

    async def seed(self, repository, identity, invoice_form):
        create = CreateInvoiceUseCase(repository)
        for fields in (
            dated(1, 100, "PAID"),
            dated(1, 40),
            dated(10, 60, "OVERDUE"),
            dated(30, 25, "PAID"),
            dated(31, 1000, "PAID"),
        ):
            result = await create.execute(identity, invoice_form(**fields))
            assert result.success, result.error

    async def test_window_figures(self, invoice_repository, identity_a, invoice_form):
        await self.seed(invoice_repository, identity_a, invoice_form)

        result = await GetDashboardStatsUseCase(invoice_repository).execute(identity_a, TODAY)

        assert result.success, result.error
        stats = result.data
        assert stats["total_revenue"] == 225.0
        assert stats["total_invoices"] == 4
        assert stats["paid_invoices"] == 2
        assert stats["unpaid_invoices"] == 1
        assert stats["paid_invoices"] + stats["unpaid_invoices"] <= stats["total_invoices"]

    async def test_chart_has_one_point_per_invoice(self, invoice_repository, identity_a, invoice_form):
        await self.seed(invoice_repository, identity_a, invoice_form)

        result = await GetDashboardStatsUseCase(invoice_repository).execute(identity_a, TODAY)

        chart = result.data["chart_data"]
        assert len(chart) == 4
        assert [point["date"] for point in chart] == [
            "2026-09-19", "2026-10-09", "2026-10-18", "2026-10-18"
        ]
        assert sum(point["paid_revenue"] for point in chart) == 125.0

    async def test_chart_merged_by_day(self, invoice_repository, identity_a, invoice_form):
        await self.seed(invoice_repository, identity_a, invoice_form)
        use_case = GetDashboardStatsUseCase(invoice_repository, DashboardService(merge_by_day=True))

        result = await use_case.execute(identity_a, TODAY)

        chart = result.data["chart_data"]
        assert len(chart) == 3
        assert chart[-1] == {"date": "2026-10-18", "total_revenue": 140.0, "paid_revenue": 100.0}

    async def test_recent_invoices_ignore_the_window(self, invoice_repository, identity_a, invoice_form):
        await self.seed(invoice_repository, identity_a, invoice_form)

        result = await GetDashboardStatsUseCase(invoice_repository, recent_limit=3).execute(identity_a, TODAY)

        recent = result.data["recent_invoices"]
        assert len(recent) == 3
        assert recent[0]["total"] == 1000.0
        assert "items" not in recent[0]
        assert recent[0]["to_address"]["name"] == "Jane Client"

    async def test_other_accounts_are_excluded(self, invoice_repository, identity_a, identity_b, invoice_form):
        await self.seed(invoice_repository, identity_a, invoice_form)

        result = await GetDashboardStatsUseCase(invoice_repository).execute(identity_b, TODAY)

        assert result.data["total_revenue"] == 0.0
        assert result.data["total_invoices"] == 0
        assert result.data["recent_invoices"] == []
        assert result.data["chart_data"] == []

    async def test_unauthenticated(self, invoice_repository):
        result = await GetDashboardStatsUseCase(invoice_repository).execute(None, TODAY)

        assert result.error == "Unauthorized"
