"""Application service: Update Order Status use case (no stock side effects)."""

from __future__ import annotations

import logging

from webstore.domain.exceptions import OrderNotFoundError
from webstore.domain.model.order import OrderStatus
from webstore.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int, status: OrderStatus) -> None:
        with self._uow:
            order = self._uow.orders.get_by_id(order_id)
            if order is None:
                raise OrderNotFoundError(f"Order #{order_id} not found")
            previous = order.status
            order.update_status(status)
            self._uow.orders.save(order)
            self._uow.commit()

        logger.info("Order #%s: %s -> %s", order_id, previous.value, status.value)
