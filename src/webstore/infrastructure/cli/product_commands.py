"""CLI commands for products, stock and users."""

from __future__ import annotations

import click

from webstore.application.add_product import AddProductHandler, ListProductsHandler
from webstore.application.add_user import AddUserHandler
from webstore.application.product_quantity import ProductQuantityHandler
from webstore.application.set_stock import SetStockHandler
from webstore.domain.exceptions import DomainException
from webstore.domain.model.catalog import CatalogKind
from webstore.infrastructure.bootstrap import unit_of_work
from webstore.infrastructure.cli.errors import DomainClickException


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--quantity", type=int, default=0, show_default=True, help="Units on hand.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--category", default=None)
@click.option("--brand", default=None)
@click.option("--gender", default=None)
@click.option("--color", default=None)
@click.option("--size", default=None)
def product_add(
    name: str,
    price: str,
    quantity: int,
    description: str,
    category: str | None,
    brand: str | None,
    gender: str | None,
    color: str | None,
    size: str | None,
) -> None:
    """Add a new product to the catalog."""
    catalog = {
        CatalogKind.CATEGORY: category,
        CatalogKind.BRAND: brand,
        CatalogKind.GENDER: gender,
        CatalogKind.COLOR: color,
        CatalogKind.SIZE: size,
    }
    handler = AddProductHandler(unit_of_work())

    try:
        dto = handler.handle(
            name=name,
            price=price,
            quantity=quantity,
            description=description,
            catalog={kind: value for kind, value in catalog.items() if value},
        )
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"Product #{dto.id} '{dto.name}' added at {dto.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(unit_of_work())

    try:
        products = handler.handle()
    except DomainException as exc:
        raise DomainClickException(exc)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<12} {'Brand':<12} {'Price':>10} {'Now':>10} {'Stock':>6}")
    click.echo("-" * 82)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.category or '-':<12} {p.brand or '-':<12} "
            f"{p.price:>10} {p.effective_price:>10} {p.quantity:>6}"
        )


@click.command("stock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units on hand.")
def product_stock(product_id: int, quantity: int) -> None:
    """Set the on-hand quantity of a product."""
    handler = SetStockHandler(unit_of_work())

    try:
        handler.handle(product_id, quantity)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"Stock of product #{product_id} set to {quantity}")


@click.command("quantity")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_quantity(product_id: int) -> None:
    """Show on-hand stock against units sold."""
    handler = ProductQuantityHandler(unit_of_work())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"{'Product':<20} {'On hand':>8} {'Sold':>8} {'Remaining':>10}")
    click.echo("-" * 49)
    click.echo(f"{dto.name:<20} {dto.on_hand:>8} {dto.sold:>8} {dto.remaining:>10}")


@click.command("add")
@click.option("--email", required=True)
@click.option("--first-name", default="")
@click.option("--last-name", default="")
def user_add(email: str, first_name: str, last_name: str) -> None:
    """Register a buyer."""
    handler = AddUserHandler(unit_of_work())

    try:
        user = handler.handle(email, first_name, last_name)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"User #{user.id} '{user.email}' added")
