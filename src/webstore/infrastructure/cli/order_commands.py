"""CLI commands for the Order aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from webstore.application.add_order_item import AddOrderItemHandler
from webstore.application.cancel_order import CancelOrderHandler
from webstore.application.dto import OrderDTO, OrderItemSpec
from webstore.application.place_order import PlaceOrderHandler
from webstore.application.remove_order_item import RemoveOrderItemHandler
from webstore.application.show_order import ListOrdersHandler, ShowOrderHandler
from webstore.application.update_order_status import UpdateOrderStatusHandler
from webstore.domain.exceptions import DomainException
from webstore.domain.model.order import OrderStatus
from webstore.infrastructure.bootstrap import unit_of_work
from webstore.infrastructure.cli.errors import DomainClickException

STATUS_CHOICE = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,7:5' (product ID:quantity) into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        pid_str, qty_str = pair.split(":", 1)
        try:
            specs.append(OrderItemSpec(product_id=int(pid_str), quantity=int(qty_str)))
        except ValueError:
            raise click.BadParameter(f"Invalid item '{pair}'. Both parts must be integers.")
    return specs


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Buyer:  {dto.email}")
    click.echo(f"Placed: {dto.order_date}")
    click.echo()
    click.echo(f"  {'Item':>5} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*53}")
    for item in dto.items:
        click.echo(
            f"  {item.id:>5} {item.product.name:<20} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*53}")
    click.echo(f"  {'Order Total':<33} {dto.total:>20}")


@click.command("place")
@click.option("--email", required=True, help="Buyer's email.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--date", "order_date", type=click.DateTime(), default=None, help="Order date (UTC), default now.")
def order_place(email: str, items: str, order_date: datetime | None) -> None:
    """Place a new order (status Pending, stock untouched)."""
    specs = _parse_items(items)
    handler = PlaceOrderHandler(unit_of_work())

    try:
        dto = handler.handle(email=email, item_specs=specs, order_date=order_date)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"Order #{dto.id} placed  (status={dto.status})")


@click.command("add-item")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Quantity to add.")
def order_add_item(order_id: int, product_id: int, quantity: int) -> None:
    """Add an item to an order (checks and reserves stock)."""
    handler = AddOrderItemHandler(unit_of_work())

    try:
        item_id = handler.handle(order_id, product_id, quantity)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"Item #{item_id} added to order #{order_id}.")


@click.command("remove-item")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--item", "item_id", required=True, type=int, help="Item ID to remove.")
def order_remove_item(order_id: int, item_id: int) -> None:
    """Remove an item from an order (returns its quantity to stock)."""
    handler = RemoveOrderItemHandler(unit_of_work())

    try:
        handler.handle(order_id, item_id)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"Item #{item_id} removed from order #{order_id}.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
def order_cancel(order_id: int) -> None:
    """Cancel an order (returns reserved stock)."""
    handler = CancelOrderHandler(unit_of_work())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"Order #{order_id} canceled.")


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--status", "status", required=True, type=STATUS_CHOICE, help="New status.")
def order_status(order_id: int, status: str) -> None:
    """Overwrite an order's status."""
    handler = UpdateOrderStatusHandler(unit_of_work())

    try:
        new_status = OrderStatus.parse(status)
        handler.handle(order_id, new_status)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"Order #{order_id} is now {new_status.value}.")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(unit_of_work())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise DomainClickException(exc)

    _display_order(dto)


@click.command("list")
@click.option("--email", default=None, help="Only this buyer's orders.")
@click.option("--status", "status", type=STATUS_CHOICE, default=None, help="Only orders in this status.")
def order_list(email: str | None, status: str | None) -> None:
    """List orders."""
    handler = ListOrdersHandler(unit_of_work())

    try:
        dtos = handler.handle(
            email=email,
            status=OrderStatus.parse(status) if status else None,
        )
    except DomainException as exc:
        raise DomainClickException(exc)

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Buyer':<25} {'Status':<12} {'Items':>5} {'Total':>12}")
    click.echo("-" * 64)
    for dto in dtos:
        click.echo(
            f"{dto.id:<6} {dto.email:<25} {dto.status:<12} {len(dto.items):>5} {dto.total:>12}"
        )
