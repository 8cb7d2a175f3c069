"""Application services: earnings and product performance reports.

Daily and monthly earnings persist a Report snapshot every time they are
computed, together with the current top-selling product.
"""

from __future__ import annotations

import logging
from datetime import date

from webstore.application.dto import ProductPerformanceDTO, ReportDTO
from webstore.domain.model.order import Order, OrderStatus
from webstore.domain.model.report import DAILY, Report
from webstore.domain.model.value_objects import Money, utc_now
from webstore.domain.repository.unit_of_work import UnitOfWork
from webstore.domain.service import earnings

logger = logging.getLogger(__name__)


class _SnapshotHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def _snapshot(self, orders: list[Order], total: Money, month: int, year: int) -> None:
        top = earnings.top_selling_products(orders, 1)
        report = Report(
            id=None,
            report_date=utc_now(),
            total_earnings=total,
            month=month,
            year=year,
            top_selling_product_id=top[0].product_id if top else None,
        )
        self._uow.reports.add(report)
        logger.info("Report #%s saved: %s (month=%d, year=%d)", report.id, total, month, year)


class DailyEarningsHandler(_SnapshotHandler):

    def handle(self, day: date | None = None) -> Money:
        """Earnings of orders completed on ``day`` (default: today, UTC)."""
        start, end = earnings.day_window(day or utc_now().date())
        with self._uow:
            orders = self._uow.orders.list_all()
            total = earnings.earnings_at_current_prices(
                earnings.completed_between(orders, start, end)
            )
            self._snapshot(orders, total, DAILY, DAILY)
            self._uow.commit()
        return total


class MonthlyEarningsHandler(_SnapshotHandler):

    def handle(self, month: int, year: int) -> Money:
        start, end = earnings.month_window(month, year)
        with self._uow:
            orders = self._uow.orders.list_all()
            total = earnings.earnings_at_current_prices(
                earnings.completed_between(orders, start, end)
            )
            self._snapshot(orders, total, month, year)
            self._uow.commit()
        return total


class TotalEarningsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> Money:
        """All-time earnings at the prices captured on each item."""
        with self._uow:
            orders = self._uow.orders.list_by_status(OrderStatus.COMPLETED)
            return earnings.earnings_at_captured_prices(orders)


class TopSellingProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, top_count: int = 5) -> list[ProductPerformanceDTO]:
        with self._uow:
            rows = earnings.top_selling_products(self._uow.orders.list_all(), top_count)
        return [ProductPerformanceDTO.from_performance(r) for r in rows]


class ListReportsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[ReportDTO]:
        with self._uow:
            return [ReportDTO.from_report(r) for r in self._uow.reports.list_all()]
