"""Domain service: earnings aggregation over completed orders.

Only COMPLETED orders count toward earnings.  Three different prices are
in play and each computation uses a specific one:

- windowed earnings (daily / monthly) use the product's *current*
  effective price;
- total earnings use the item's captured ``unit_price``;
- the top-selling ranking uses the product's current discounted price if
  it has one, else the item's captured ``unit_price``.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from webstore.domain.exceptions import ValidationError
from webstore.domain.model.order import Order
from webstore.domain.model.report import ProductPerformance
from webstore.domain.model.value_objects import Money


def day_window(day: date) -> tuple[datetime, datetime]:
    start = datetime(day.year, day.month, day.day)
    return start, start + timedelta(days=1)


def month_window(month: int, year: int) -> tuple[datetime, datetime]:
    """Half-open ``[first of month, first of next month)``."""
    if not 1 <= month <= 12:
        raise ValidationError("month must be 1-12")
    if year < 1:
        raise ValidationError("year must be positive")
    start = datetime(year, month, 1)
    if month == 12:
        return start, datetime(year + 1, 1, 1)
    return start, datetime(year, month + 1, 1)


def completed(orders: list[Order]) -> list[Order]:
    return [o for o in orders if o.is_completed]


def completed_between(orders: list[Order], start: datetime, end: datetime) -> list[Order]:
    return [o for o in completed(orders) if start <= o.order_date < end]


def earnings_at_current_prices(orders: list[Order]) -> Money:
    return Money.total(
        [item.product.effective_price * item.quantity.value for o in orders for item in o.items]
    )


def earnings_at_captured_prices(orders: list[Order]) -> Money:
    return Money.total([o.total for o in orders])


def top_selling_products(orders: list[Order], top_count: int) -> list[ProductPerformance]:
    """Rank products by sales value across completed orders.

    Products are grouped in the order they are first seen and the sort is
    stable, so equal sales values keep that first-seen order.
    """
    if top_count < 1:
        raise ValidationError("top_count must be at least 1")

    names: dict[int, str] = {}
    sales: dict[int, Money] = {}
    units: dict[int, int] = {}
    for order in completed(orders):
        for item in order.items:
            product = item.product
            price = item.unit_price if product.discounted_price.is_zero else product.discounted_price
            pid = product.id
            names.setdefault(pid, product.name)
            sales[pid] = sales.get(pid, Money.zero()) + price * item.quantity.value
            units[pid] = units.get(pid, 0) + item.quantity.value

    ranked = sorted(sales, key=lambda pid: sales[pid].amount, reverse=True)
    return [
        ProductPerformance(
            product_id=pid,
            product_name=names[pid],
            total_sales=sales[pid],
            units_sold=units[pid],
        )
        for pid in ranked[:top_count]
    ]


def units_sold(orders: list[Order], product_id: int) -> int:
    return sum(
        item.quantity.value
        for o in completed(orders)
        for item in o.items
        if item.product.id == product_id
    )
