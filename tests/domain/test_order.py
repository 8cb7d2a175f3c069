"""Unit tests for the Order aggregate and its status rules."""

from datetime import datetime

import pytest

from webstore.domain.exceptions import (
    AlreadyCanceledError,
    InvalidTransitionError,
    ItemNotFoundError,
    ValidationError,
)
from webstore.domain.model.order import Order, OrderItem, OrderStatus
from webstore.domain.model.product import Product
from webstore.domain.model.user import User
from webstore.domain.model.value_objects import Money

USER = User(id=1, email="a@b.com")


def _product(pid: int = 1, price: str = "50.00") -> Product:
    return Product(id=pid, name=f"P{pid}", price=Money.of(price), quantity=10)


def _order(*items: OrderItem) -> Order:
    return Order.place(USER, datetime(2024, 5, 1), list(items))


class TestOrderPlacement:

    def test_new_order_is_pending(self):
        order = _order(OrderItem.for_product(_product(), 2))
        assert order.id is None
        assert order.status == OrderStatus.PENDING
        assert order.user.email == "a@b.com"

    def test_item_captures_effective_price(self):
        product = _product(price="100.00")
        product.discounted_price = Money.of("80.00")
        item = OrderItem.for_product(product, 3)
        assert item.unit_price == Money.of("80.00")
        assert item.line_total == Money.of("240.00")
        assert item.reserved is False

    def test_total_is_sum_of_items(self):
        order = _order(
            OrderItem.for_product(_product(1, "15.00"), 3),
            OrderItem.for_product(_product(2, "25.00"), 5),
        )
        assert order.total == Money.of("170.00")

    def test_non_positive_item_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            OrderItem.for_product(_product(), 0)


class TestOrderItems:

    def test_remove_item(self):
        item = OrderItem.for_product(_product(), 1)
        item.id = 7
        order = _order(item)
        removed = order.remove_item(7)
        assert removed is item
        assert order.items == []

    def test_remove_unknown_item_rejected(self):
        order = _order()
        order.id = 3
        with pytest.raises(ItemNotFoundError, match="Item #9 not found in order #3"):
            order.remove_item(9)

    def test_reserved_items(self):
        placed = OrderItem.for_product(_product(1), 1)
        added = OrderItem.for_product(_product(2), 1, reserved=True)
        order = _order(placed, added)
        assert order.reserved_items == [added]


class TestOrderStatus:

    def test_cancel(self):
        order = _order()
        order.cancel()
        assert order.status == OrderStatus.CANCELED

    def test_cancel_twice_rejected(self):
        order = _order()
        order.cancel()
        with pytest.raises(AlreadyCanceledError, match="already canceled"):
            order.cancel()

    def test_already_canceled_is_an_invalid_transition(self):
        assert issubclass(AlreadyCanceledError, InvalidTransitionError)

    @pytest.mark.parametrize("status", list(OrderStatus))
    def test_update_status_overwrites(self, status):
        order = _order()
        order.update_status(status)
        assert order.status == status

    def test_update_status_is_unguarded(self):
        order = _order()
        order.update_status(OrderStatus.DELIVERED)
        order.update_status(OrderStatus.PENDING)
        assert order.status == OrderStatus.PENDING

    def test_cancel_from_completed_allowed(self):
        order = _order()
        order.update_status(OrderStatus.COMPLETED)
        order.cancel()
        assert order.status == OrderStatus.CANCELED


class TestOrderStatusParse:

    @pytest.mark.parametrize("raw", ["completed", "Completed", " COMPLETED "])
    def test_parse_ignores_case(self, raw):
        assert OrderStatus.parse(raw) == OrderStatus.COMPLETED

    def test_parse_unknown(self):
        with pytest.raises(ValidationError, match="Unknown order status"):
            OrderStatus.parse("lost")
