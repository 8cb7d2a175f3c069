"""Application service: Cancel Order use case.

Marks the order CANCELED and, in the same transaction, puts back the
stock held by its reserved items.  Canceling twice is rejected.
"""

from __future__ import annotations

import logging

from webstore.domain.exceptions import AlreadyCanceledError, OrderNotFoundError
from webstore.domain.repository.unit_of_work import UnitOfWork
from webstore.domain.service.inventory_ledger import InventoryLedger

logger = logging.getLogger(__name__)


class CancelOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> None:
        with self._uow:
            order = self._uow.orders.get_by_id(order_id)
            if order is None:
                raise OrderNotFoundError(f"Order #{order_id} not found")

            try:
                order.cancel()
            except AlreadyCanceledError:
                logger.warning("Order #%s: cancel rejected, already canceled", order_id)
                raise

            InventoryLedger(self._uow.products).release_items(order.items)
            self._uow.orders.save(order)
            self._uow.commit()

        logger.info("Order #%s canceled", order_id)
