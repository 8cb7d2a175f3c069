"""SQLAlchemy implementation of DiscountRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from webstore.domain.model.discount import Discount
from webstore.domain.repository.discount_repository import DiscountRepository
from webstore.infrastructure.persistence.orm import DiscountRow


def to_discount(row: DiscountRow) -> Discount:
    return Discount(
        id=row.id,
        name=row.name,
        percentage=Decimal(row.percentage),
        start_date=row.start_date,
        end_date=row.end_date,
    )


class SqlDiscountRepository(DiscountRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, discount_id: int) -> Discount | None:
        row = self._session.get(DiscountRow, discount_id)
        return to_discount(row) if row is not None else None

    def list_all(self) -> list[Discount]:
        rows = self._session.scalars(select(DiscountRow).order_by(DiscountRow.id))
        return [to_discount(row) for row in rows]

    def list_in_range(self, start: datetime, end: datetime) -> list[Discount]:
        rows = self._session.scalars(
            select(DiscountRow)
            .where(DiscountRow.start_date >= start, DiscountRow.end_date <= end)
            .order_by(DiscountRow.start_date)
        )
        return [to_discount(row) for row in rows]

    def save(self, discount: Discount) -> None:
        row = self._session.get(DiscountRow, discount.id) if discount.id is not None else None
        if row is None:
            row = DiscountRow()
            self._session.add(row)
        row.name = discount.name
        row.percentage = discount.percentage
        row.start_date = discount.start_date
        row.end_date = discount.end_date
        self._session.flush()
        discount.id = row.id
