"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its items.  Stock movements are
not done here: the application handlers coordinate the order with the
inventory ledger, and the order only records which items hold stock.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from webstore.domain.exceptions import (
    AlreadyCanceledError,
    ItemNotFoundError,
    ValidationError,
)
from webstore.domain.model.product import Product
from webstore.domain.model.user import User
from webstore.domain.model.value_objects import Money, Quantity, utc_now


class OrderStatus(Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELED = "Canceled"
    COMPLETED = "Completed"

    @staticmethod
    def parse(raw: str) -> OrderStatus:
        for status in OrderStatus:
            if status.value.lower() == raw.strip().lower():
                return status
        names = ", ".join(s.value for s in OrderStatus)
        raise ValidationError(f"Unknown order status '{raw}' (expected one of {names})")


@dataclass
class OrderItem:
    """A product line on an order.

    ``unit_price`` is the product's effective price when the item was
    created.  ``reserved`` is True when the item's quantity was taken from
    the product's stock, which is only the case for items added after
    placement.  Canceling an order returns stock for reserved items only;
    removing a single item always returns its quantity.
    """

    id: int | None
    product: Product
    quantity: Quantity
    unit_price: Money
    reserved: bool = False

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @staticmethod
    def for_product(product: Product, quantity: int, reserved: bool = False) -> OrderItem:
        return OrderItem(
            id=None,
            product=product,
            quantity=Quantity(quantity),
            unit_price=product.effective_price,
            reserved=reserved,
        )


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.place()`` for new orders.  The ``__init__`` stays simple so
    repositories can reconstitute persisted orders without re-validating.
    """

    id: int | None
    user: User
    items: list[OrderItem]
    status: OrderStatus = OrderStatus.PENDING
    order_date: datetime = field(default_factory=utc_now)

    @staticmethod
    def place(user: User, order_date: datetime, items: list[OrderItem]) -> Order:
        """Create a new order in Pending status."""
        return Order(
            id=None,
            user=user,
            items=list(items),
            status=OrderStatus.PENDING,
            order_date=order_date,
        )

    # --- Items -----------------------------------------------------------------

    def add_item(self, item: OrderItem) -> None:
        self.items.append(item)

    def remove_item(self, item_id: int) -> OrderItem:
        item = self.find_item(item_id)
        self.items.remove(item)
        return item

    def find_item(self, item_id: int) -> OrderItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise ItemNotFoundError(f"Item #{item_id} not found in order #{self.id}")

    # --- State transitions -----------------------------------------------------

    def cancel(self) -> None:
        """Transition any status -> CANCELED.

        Releasing the stock held by reserved items is the caller's job and
        must happen in the same unit of work.
        """
        if self.status == OrderStatus.CANCELED:
            raise AlreadyCanceledError(f"Order #{self.id} is already canceled")
        self.status = OrderStatus.CANCELED

    def update_status(self, status: OrderStatus) -> None:
        # Unconditional overwrite; only cancel() guards its transition.
        self.status = status

    # --- Computed properties ---------------------------------------------------

    @property
    def total(self) -> Money:
        return Money.total([item.line_total for item in self.items])

    @property
    def is_completed(self) -> bool:
        return self.status == OrderStatus.COMPLETED

    @property
    def reserved_items(self) -> list[OrderItem]:
        return [item for item in self.items if item.reserved]
