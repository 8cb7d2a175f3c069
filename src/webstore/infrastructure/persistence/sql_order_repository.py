"""SQLAlchemy implementation of OrderRepository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from webstore.domain.model.order import Order, OrderItem, OrderStatus
from webstore.domain.model.value_objects import Money, Quantity
from webstore.domain.repository.order_repository import OrderRepository
from webstore.infrastructure.persistence.orm import OrderItemRow, OrderRow, UserRow
from webstore.infrastructure.persistence.sql_product_repository import to_product
from webstore.infrastructure.persistence.sql_user_repository import to_user


class SqlOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        row = self._session.get(OrderRow, order_id)
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Order]:
        return self._list(select(OrderRow))

    def list_by_status(self, status: OrderStatus) -> list[Order]:
        return self._list(select(OrderRow).where(OrderRow.status == status.value))

    def list_by_user_email(self, email: str) -> list[Order]:
        return self._list(
            select(OrderRow)
            .join(UserRow, OrderRow.user_id == UserRow.id)
            .where(func.lower(UserRow.email) == email.strip().lower())
        )

    def save(self, order: Order) -> None:
        row = self._session.get(OrderRow, order.id) if order.id is not None else None
        if row is None:
            row = OrderRow()
            self._session.add(row)

        row.user_id = order.user.id  # type: ignore[assignment]
        row.order_date = order.order_date
        row.status = order.status.value

        # Items missing from the aggregate are deleted by the delete-orphan cascade.
        existing = {item_row.id: item_row for item_row in row.items}
        item_rows: list[OrderItemRow] = []
        for item in order.items:
            item_row = existing.get(item.id) if item.id is not None else None
            if item_row is None:
                item_row = OrderItemRow()
            item_row.product_id = item.product.id  # type: ignore[assignment]
            item_row.quantity = item.quantity.value
            item_row.unit_price = item.unit_price.amount
            item_row.reserved = item.reserved
            item_rows.append(item_row)
        row.items = item_rows

        self._session.flush()
        order.id = row.id
        for item, item_row in zip(order.items, item_rows):
            item.id = item_row.id

    # --- Mapping --------------------------------------------------------------

    def _list(self, stmt) -> list[Order]:
        rows = self._session.scalars(stmt.order_by(OrderRow.id))
        return [self._to_domain(row) for row in rows]

    @staticmethod
    def _to_domain(row: OrderRow) -> Order:
        return Order(
            id=row.id,
            user=to_user(row.user),
            status=OrderStatus(row.status),
            order_date=row.order_date,
            items=[
                OrderItem(
                    id=item_row.id,
                    product=to_product(item_row.product),
                    quantity=Quantity(item_row.quantity),
                    unit_price=Money.of(item_row.unit_price),
                    reserved=item_row.reserved,
                )
                for item_row in row.items
            ],
        )
