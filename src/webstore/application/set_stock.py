"""Application service: Set Stock use case.

Overwrites a product's on-hand quantity, e.g. after a stock count or a
delivery.  Goes through ``get_for_update`` like every other stock write.
"""

from __future__ import annotations

import logging

from webstore.domain.exceptions import ProductNotFoundError
from webstore.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SetStockHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int, quantity: int) -> None:
        with self._uow:
            product = self._uow.products.get_for_update(product_id)
            if product is None:
                raise ProductNotFoundError(f"Product #{product_id} not found")
            product.set_stock(quantity)
            self._uow.products.save(product)
            self._uow.commit()

        logger.info("Stock of product #%s set to %d", product_id, quantity)
