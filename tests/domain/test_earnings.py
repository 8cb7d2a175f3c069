"""Unit tests for the earnings aggregation functions."""

from datetime import date, datetime

import pytest

from webstore.domain.exceptions import ValidationError
from webstore.domain.model.order import Order, OrderItem, OrderStatus
from webstore.domain.model.product import Product
from webstore.domain.model.user import User
from webstore.domain.model.value_objects import Money
from webstore.domain.service import earnings

USER = User(id=1, email="a@b.com")


def _product(pid: int, price: str) -> Product:
    return Product(id=pid, name=f"P{pid}", price=Money.of(price), quantity=100)


def _order(
    *lines: tuple[Product, int],
    status: OrderStatus = OrderStatus.COMPLETED,
    when: datetime = datetime(2024, 5, 10, 12, 0),
) -> Order:
    order = Order.place(USER, when, [OrderItem.for_product(p, q) for p, q in lines])
    order.update_status(status)
    return order


# ── Windows ──────────────────────────────────────────────


class TestWindows:

    def test_day_window(self):
        assert earnings.day_window(date(2024, 5, 10)) == (
            datetime(2024, 5, 10),
            datetime(2024, 5, 11),
        )

    def test_month_window_is_half_open(self):
        assert earnings.month_window(2, 2024) == (datetime(2024, 2, 1), datetime(2024, 3, 1))

    def test_december_rolls_into_next_year(self):
        assert earnings.month_window(12, 2024) == (datetime(2024, 12, 1), datetime(2025, 1, 1))

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_invalid_month(self, month):
        with pytest.raises(ValidationError, match="month must be 1-12"):
            earnings.month_window(month, 2024)

    def test_invalid_year(self):
        with pytest.raises(ValidationError, match="year must be positive"):
            earnings.month_window(5, 0)


# ── Filtering ────────────────────────────────────────────


class TestCompletedBetween:

    def test_only_completed_orders_count(self):
        p = _product(1, "10")
        done = _order((p, 1))
        pending = _order((p, 1), status=OrderStatus.PENDING)
        canceled = _order((p, 1), status=OrderStatus.CANCELED)
        assert earnings.completed([done, pending, canceled]) == [done]

    def test_last_moment_of_month_included(self):
        p = _product(1, "10")
        late = _order((p, 1), when=datetime(2024, 5, 31, 23, 59, 59))
        next_month = _order((p, 1), when=datetime(2024, 6, 1))
        start, end = earnings.month_window(5, 2024)
        assert earnings.completed_between([late, next_month], start, end) == [late]


# ── Sums ─────────────────────────────────────────────────


class TestEarnings:

    def test_current_prices_follow_later_discounts(self):
        p = _product(1, "100")
        order = _order((p, 2))
        p.discounted_price = Money.of("80")
        assert earnings.earnings_at_current_prices([order]) == Money.of("160.00")

    def test_captured_prices_ignore_later_discounts(self):
        p = _product(1, "100")
        order = _order((p, 2))
        p.discounted_price = Money.of("80")
        assert earnings.earnings_at_captured_prices([order]) == Money.of("200.00")

    def test_no_orders_is_zero(self):
        assert earnings.earnings_at_current_prices([]).is_zero
        assert earnings.earnings_at_captured_prices([]).is_zero


# ── Top selling ──────────────────────────────────────────


class TestTopSelling:

    def test_ranked_by_sales_value(self):
        cheap, dear = _product(1, "5"), _product(2, "50")
        orders = [_order((cheap, 10), (dear, 2)), _order((cheap, 1))]
        ranked = earnings.top_selling_products(orders, 5)
        assert [r.product_id for r in ranked] == [2, 1]
        assert ranked[0].total_sales == Money.of("100.00")
        assert ranked[1].total_sales == Money.of("55.00")
        assert ranked[1].units_sold == 11

    def test_top_count_limits_result(self):
        orders = [_order((_product(i, str(i)), 1)) for i in range(1, 6)]
        ranked = earnings.top_selling_products(orders, 2)
        assert [r.product_id for r in ranked] == [5, 4]

    def test_ties_keep_first_seen_order(self):
        a, b = _product(1, "10"), _product(2, "10")
        ranked = earnings.top_selling_products([_order((b, 1), (a, 1))], 5)
        assert [r.product_id for r in ranked] == [2, 1]

    def test_uses_current_discounted_price_when_set(self):
        p = _product(1, "100")
        order = _order((p, 1))
        p.discounted_price = Money.of("70")
        ranked = earnings.top_selling_products([order], 1)
        assert ranked[0].total_sales == Money.of("70.00")

    def test_ignores_orders_that_are_not_completed(self):
        ranked = earnings.top_selling_products(
            [_order((_product(1, "10"), 1), status=OrderStatus.SHIPPED)], 5
        )
        assert ranked == []

    def test_top_count_must_be_positive(self):
        with pytest.raises(ValidationError, match="top_count must be at least 1"):
            earnings.top_selling_products([], 0)


class TestUnitsSold:

    def test_counts_completed_units_for_product(self):
        p, q = _product(1, "10"), _product(2, "10")
        orders = [
            _order((p, 3), (q, 1)),
            _order((p, 4)),
            _order((p, 9), status=OrderStatus.CANCELED),
        ]
        assert earnings.units_sold(orders, 1) == 7
