"""Application service: Add Order Item use case.

Unlike placement, adding an item checks stock and takes the quantity out
of the product's inventory in the same transaction.
"""

from __future__ import annotations

import logging

from webstore.domain.exceptions import InsufficientStockError, OrderNotFoundError
from webstore.domain.model.order import OrderItem
from webstore.domain.repository.unit_of_work import UnitOfWork
from webstore.domain.service.inventory_ledger import InventoryLedger

logger = logging.getLogger(__name__)


class AddOrderItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int, product_id: int, quantity: int) -> int:
        """Append an item to an existing order and return the new item's ID."""
        with self._uow:
            order = self._uow.orders.get_by_id(order_id)
            if order is None:
                raise OrderNotFoundError(f"Order #{order_id} not found")

            ledger = InventoryLedger(self._uow.products)
            try:
                product = ledger.reserve(product_id, quantity)
            except InsufficientStockError:
                logger.warning(
                    "Order #%s: cannot add %d of product #%s, not enough stock",
                    order_id, quantity, product_id,
                )
                raise

            item = OrderItem.for_product(product, quantity, reserved=True)
            order.add_item(item)
            self._uow.orders.save(order)
            self._uow.commit()

        logger.info("Order #%s: added item #%s (%d x product #%s)", order_id, item.id, quantity, product_id)
        return item.id  # type: ignore[return-value]
