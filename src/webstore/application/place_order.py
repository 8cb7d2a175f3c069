"""Application service: Place Order use case.

Resolves the buyer by email and each requested product, then creates a
Pending order whose items capture the products' current effective
prices.  Placement does not check or reserve stock; only items added
later through AddOrderItemHandler do.
"""

from __future__ import annotations

import logging
from datetime import datetime

from webstore.application.dto import OrderDTO, OrderItemSpec
from webstore.domain.exceptions import (
    ProductNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from webstore.domain.model.order import Order, OrderItem
from webstore.domain.model.value_objects import utc_now
from webstore.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        email: str,
        item_specs: list[OrderItemSpec],
        order_date: datetime | None = None,
    ) -> OrderDTO:
        if not item_specs:
            raise ValidationError("Order must contain at least one item")

        with self._uow:
            user = self._uow.users.get_by_email(email)
            if user is None:
                logger.warning("Order rejected: no user with email %s", email)
                raise UserNotFoundError(f"User with email '{email}' does not exist")

            items: list[OrderItem] = []
            for spec in item_specs:
                product = self._uow.products.get_by_id(spec.product_id)
                if product is None:
                    raise ProductNotFoundError(f"Product #{spec.product_id} not found")
                items.append(OrderItem.for_product(product, spec.quantity))

            order = Order.place(user, order_date or utc_now(), items)
            self._uow.orders.save(order)
            self._uow.commit()

        logger.info("Order #%s placed for %s with %d item(s)", order.id, user.email, len(items))
        return OrderDTO.from_order(order)
