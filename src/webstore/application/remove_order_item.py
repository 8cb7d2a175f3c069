"""Application service: Remove Order Item use case."""

from __future__ import annotations

import logging

from webstore.domain.exceptions import ItemNotFoundError
from webstore.domain.repository.unit_of_work import UnitOfWork
from webstore.domain.service.inventory_ledger import InventoryLedger

logger = logging.getLogger(__name__)


class RemoveOrderItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int, item_id: int) -> None:
        """Delete an item and put its quantity back on the product."""
        with self._uow:
            order = self._uow.orders.get_by_id(order_id)
            if order is None:
                raise ItemNotFoundError(f"Item #{item_id} not found in order #{order_id}")

            item = order.remove_item(item_id)
            ledger = InventoryLedger(self._uow.products)
            ledger.release(item.product.id, item.quantity.value)  # type: ignore[arg-type]
            self._uow.orders.save(order)
            self._uow.commit()

        logger.info("Order #%s: removed item #%s", order_id, item_id)
