"""CLI commands for discounts."""

from __future__ import annotations

from datetime import datetime

import click

from webstore.application.apply_discount import ApplyDiscountHandler
from webstore.application.manage_discounts import CreateDiscountHandler, ListDiscountsHandler
from webstore.application.remove_expired_discounts import RemoveExpiredDiscountsHandler
from webstore.domain.exceptions import DomainException
from webstore.infrastructure.bootstrap import unit_of_work
from webstore.infrastructure.cli.errors import DomainClickException


@click.command("create")
@click.option("--name", required=True, help="Discount name.")
@click.option("--percentage", required=True, help="Percent off (e.g. 20).")
@click.option("--start", required=True, type=click.DateTime(), help="First valid moment (UTC).")
@click.option("--end", required=True, type=click.DateTime(), help="Expiry moment (UTC).")
def discount_create(name: str, percentage: str, start: datetime, end: datetime) -> None:
    """Create a discount."""
    handler = CreateDiscountHandler(unit_of_work())

    try:
        discount = handler.handle(name, percentage, start, end)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"Discount #{discount.id} '{discount.name}' created")


@click.command("list")
@click.option("--start", type=click.DateTime(), default=None)
@click.option("--end", type=click.DateTime(), default=None)
def discount_list(start: datetime | None, end: datetime | None) -> None:
    """List discounts, optionally only those inside a date range."""
    handler = ListDiscountsHandler(unit_of_work())

    try:
        discounts = handler.handle(start, end)
    except DomainException as exc:
        raise DomainClickException(exc)

    if not discounts:
        click.echo("No discounts found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'%':>7} {'Start':<17} {'End':<17}")
    click.echo("-" * 70)
    for d in discounts:
        click.echo(
            f"{d.id:<6} {d.name:<20} {d.percentage:>7} "
            f"{d.start_date:%Y-%m-%d %H:%M} {d.end_date:%Y-%m-%d %H:%M}"
        )


@click.command("apply")
@click.option("--discount", "discount_id", required=True, type=int, help="Discount ID.")
@click.option("--product", "product_id", type=int, default=None, help="Target one product.")
@click.option("--category", default=None, help="Target every product in a category.")
@click.option("--brand", default=None, help="Target every product of a brand.")
def discount_apply(
    discount_id: int,
    product_id: int | None,
    category: str | None,
    brand: str | None,
) -> None:
    """Apply a discount to a product, a category or a brand."""
    targets = [t for t in (product_id, category, brand) if t is not None]
    if len(targets) != 1:
        raise click.UsageError("Give exactly one of --product, --category or --brand.")

    handler = ApplyDiscountHandler(unit_of_work())

    try:
        if product_id is not None:
            message = handler.to_product(product_id, discount_id)
        elif category is not None:
            message = handler.to_category(category, discount_id)
        else:
            message = handler.to_brand(brand, discount_id)  # type: ignore[arg-type]
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(message)


@click.command("sweep")
def discount_sweep() -> None:
    """Detach expired discounts from every product."""
    handler = RemoveExpiredDiscountsHandler(unit_of_work())

    try:
        changed = handler.handle()
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"{changed} product(s) updated.")
