"""Application service: product quantity report (query).

Shows a product's on-hand quantity next to the units sold in completed
orders.  ``remaining`` is on-hand minus sold, as the store has always
reported it, even though items added to orders have already been taken
out of the on-hand figure.
"""

from __future__ import annotations

from webstore.application.dto import ProductQuantityDTO
from webstore.domain.exceptions import ProductNotFoundError, ValidationError
from webstore.domain.model.order import OrderStatus
from webstore.domain.repository.unit_of_work import UnitOfWork
from webstore.domain.service.earnings import units_sold


class ProductQuantityHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int) -> ProductQuantityDTO:
        if product_id <= 0:
            raise ValidationError("Product ID must be a positive integer")
        with self._uow:
            product = self._uow.products.get_by_id(product_id)
            if product is None:
                raise ProductNotFoundError(f"Product #{product_id} not found")
            sold = units_sold(self._uow.orders.list_by_status(OrderStatus.COMPLETED), product_id)

        return ProductQuantityDTO(
            product_id=product_id,
            name=product.name,
            on_hand=product.quantity,
            sold=sold,
            remaining=product.quantity - sold,
        )
