"""Domain service: Inventory Ledger.

The single place that moves a product's on-hand quantity.  Order handlers
call ``reserve`` when stock is committed to an order and ``release`` when
that commitment is undone.

Products are loaded with ``ProductRepository.get_for_update`` so two
reservations against the same product queue behind one another instead of
both reading the same pre-decrement quantity.
"""

from __future__ import annotations

import logging

from webstore.domain.exceptions import ProductNotFoundError
from webstore.domain.model.order import OrderItem
from webstore.domain.model.product import Product
from webstore.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class InventoryLedger:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def reserve(self, product_id: int, quantity: int) -> Product:
        """Take ``quantity`` units out of stock.

        Raises InsufficientStockError (leaving the product untouched) if
        fewer units are on hand.
        """
        product = self._lock(product_id)
        product.take_stock(quantity)
        self._product_repo.save(product)
        logger.debug("Reserved %d of product #%s (%d left)", quantity, product_id, product.quantity)
        return product

    def release(self, product_id: int, quantity: int) -> None:
        """Put ``quantity`` units back.  A product that no longer exists is skipped."""
        product = self._product_repo.get_for_update(product_id)
        if product is None:
            logger.warning(
                "Cannot release %d units: product #%s no longer exists", quantity, product_id
            )
            return
        product.return_stock(quantity)
        self._product_repo.save(product)
        logger.debug("Released %d of product #%s (%d on hand)", quantity, product_id, product.quantity)

    def release_items(self, items: list[OrderItem]) -> None:
        """Release every reserved item; unreserved items hold no stock."""
        for item in items:
            if item.reserved:
                self.release(item.product.id, item.quantity.value)  # type: ignore[arg-type]

    def _lock(self, product_id: int) -> Product:
        product = self._product_repo.get_for_update(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product #{product_id} not found")
        return product
