"""SQLAlchemy implementation of ReportRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from webstore.domain.model.report import Report
from webstore.domain.model.value_objects import Money
from webstore.domain.repository.report_repository import ReportRepository
from webstore.infrastructure.persistence.orm import ReportRow


class SqlReportRepository(ReportRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, report: Report) -> None:
        row = ReportRow(
            report_date=report.report_date,
            total_earnings=report.total_earnings.amount,
            month=report.month,
            year=report.year,
            top_selling_product_id=report.top_selling_product_id,
        )
        self._session.add(row)
        self._session.flush()
        report.id = row.id

    def list_all(self) -> list[Report]:
        rows = self._session.scalars(select(ReportRow).order_by(ReportRow.id))
        return [
            Report(
                id=row.id,
                report_date=row.report_date,
                total_earnings=Money.of(row.total_earnings),
                month=row.month,
                year=row.year,
                top_selling_product_id=row.top_selling_product_id,
            )
            for row in rows
        ]
