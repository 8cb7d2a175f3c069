"""Application service: order queries."""

from __future__ import annotations

from webstore.application.dto import OrderDTO
from webstore.domain.exceptions import OrderNotFoundError
from webstore.domain.model.order import OrderStatus
from webstore.domain.repository.unit_of_work import UnitOfWork


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> OrderDTO:
        with self._uow:
            order = self._uow.orders.get_by_id(order_id)
            if order is None:
                raise OrderNotFoundError(f"Order #{order_id} not found")
            return OrderDTO.from_order(order)


class ListOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        email: str | None = None,
        status: OrderStatus | None = None,
    ) -> list[OrderDTO]:
        """List all orders, or only one user's, or only one status."""
        with self._uow:
            if email is not None:
                orders = self._uow.orders.list_by_user_email(email)
            elif status is not None:
                orders = self._uow.orders.list_by_status(status)
            else:
                orders = self._uow.orders.list_all()
            return [OrderDTO.from_order(o) for o in orders]
