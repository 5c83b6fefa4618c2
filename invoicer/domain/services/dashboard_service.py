"""Dashboard service for revenue aggregation.
Turns the invoices of an account's trailing window into summary figures.
"""

from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Dict, List, Optional

from invoicer.domain.models.base import ValidationError
from invoicer.domain.models.dashboard import RevenueRecord, ChartPoint
from invoicer.domain.models.invoice import InvoiceStatus


ZERO = Decimal("0")


class DashboardService:
    """
    Domain service for dashboard calculations.

    By default every invoice yields its own chart point, so a day with several
    invoices has several points. With ``merge_by_day`` the points of one
    calendar day are summed into a single point and ordered by date.
    """

    def __init__(self, window_days: int = 30, merge_by_day: bool = False):
        if window_days <= 0:
            raise ValidationError("Dashboard window must be at least one day", "window_days")
        self.window_days = window_days
        self.merge_by_day = merge_by_day

    def window_start(self, today: Optional[date] = None) -> date:
        """First calendar day included in the window."""
        today = today or date.today()
        if isinstance(today, datetime):
            today = today.date()
        return today - timedelta(days=self.window_days)

    def total_revenue(self, records: List[RevenueRecord]) -> Decimal:
        """Sum of all totals, whatever their status."""
        return sum((Decimal(record.total) for record in records), ZERO)

    def chart_data(self, records: List[RevenueRecord]) -> List[ChartPoint]:
        points = [self._to_point(record) for record in records]
        if not self.merge_by_day:
            return points
        return self._merge_points(points)

    def _to_point(self, record: RevenueRecord) -> ChartPoint:
        total = Decimal(record.total)
        return ChartPoint(
            date=record.invoice_date.isoformat(),
            total_revenue=total,
            paid_revenue=total if record.status == InvoiceStatus.PAID else ZERO
        )

    def _merge_points(self, points: List[ChartPoint]) -> List[ChartPoint]:
        buckets: Dict[str, ChartPoint] = {}
        for point in sorted(points, key=lambda p: p.date):
            existing = buckets.get(point.date)
            if existing is None:
                buckets[point.date] = point
            else:
                buckets[point.date] = ChartPoint(
                    date=point.date,
                    total_revenue=existing.total_revenue + point.total_revenue,
                    paid_revenue=existing.paid_revenue + point.paid_revenue
                )
        return list(buckets.values())
