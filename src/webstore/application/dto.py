"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from webstore.domain.model.order import Order
from webstore.domain.model.product import Product
from webstore.domain.model.report import ProductPerformance, Report


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the buyer asked for (product ID + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: str  # formatted, e.g. "$15.00"
    effective_price: str
    quantity: int
    category: str | None
    brand: str | None
    gender: str | None
    color: str | None
    size: str | None
    discount_names: list[str]

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        def name_of(entry):
            return entry.name if entry is not None else None

        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            price=str(product.price),
            effective_price=str(product.effective_price),
            quantity=product.quantity,
            category=name_of(product.category),
            brand=name_of(product.brand),
            gender=name_of(product.gender),
            color=name_of(product.color),
            size=name_of(product.size),
            discount_names=[d.name for d in product.discounts],
        )


@dataclass(frozen=True)
class OrderItemDTO:
    id: int
    product: ProductDTO
    quantity: int
    unit_price: str
    line_total: str
    reserved: bool


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    email: str
    status: str
    order_date: str
    items: list[OrderItemDTO]
    total: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            email=order.user.email,
            status=order.status.value,
            order_date=order.order_date.strftime("%Y-%m-%d %H:%M UTC"),
            items=[
                OrderItemDTO(
                    id=item.id,  # type: ignore[arg-type]
                    product=ProductDTO.from_product(item.product),
                    quantity=item.quantity.value,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                    reserved=item.reserved,
                )
                for item in order.items
            ],
            total=str(order.total),
        )


@dataclass(frozen=True)
class ProductPerformanceDTO:
    product_id: int
    product_name: str
    total_sales: str
    units_sold: int

    @staticmethod
    def from_performance(row: ProductPerformance) -> ProductPerformanceDTO:
        return ProductPerformanceDTO(
            product_id=row.product_id,
            product_name=row.product_name,
            total_sales=str(row.total_sales),
            units_sold=row.units_sold,
        )


@dataclass(frozen=True)
class ReportDTO:
    id: int
    report_date: str
    total_earnings: str
    month: int
    year: int
    top_selling_product_id: int | None

    @staticmethod
    def from_report(report: Report) -> ReportDTO:
        return ReportDTO(
            id=report.id,  # type: ignore[arg-type]
            report_date=report.report_date.strftime("%Y-%m-%d %H:%M UTC"),
            total_earnings=str(report.total_earnings),
            month=report.month,
            year=report.year,
            top_selling_product_id=report.top_selling_product_id,
        )


@dataclass(frozen=True)
class ProductQuantityDTO:
    """On-hand stock next to units sold in completed orders."""

    product_id: int
    name: str
    on_hand: int
    sold: int
    remaining: int
