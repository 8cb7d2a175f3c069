import logging

import click

from webstore.config import LOG_FORMAT, Settings
from webstore.domain.exceptions import DomainException
from webstore.infrastructure.cli.discount_commands import (
    discount_apply,
    discount_create,
    discount_list,
    discount_sweep,
)
from webstore.infrastructure.cli.order_commands import (
    order_add_item,
    order_cancel,
    order_list,
    order_place,
    order_remove_item,
    order_show,
    order_status,
)
from webstore.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_quantity,
    product_stock,
    user_add,
)
from webstore.infrastructure.cli.report_commands import (
    report_daily,
    report_list,
    report_monthly,
    report_top,
    report_total,
)


@click.group()
def cli() -> None:
    """Web store: orders, inventory, discounts and reports"""
    try:
        settings = Settings.from_env()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products and stock."""


@cli.group()
def user() -> None:
    """Manage users."""


@cli.group()
def discount() -> None:
    """Manage discounts."""


@cli.group()
def report() -> None:
    """Earnings reports."""


# Register subcommands
order.add_command(order_place)
order.add_command(order_add_item)
order.add_command(order_remove_item)
order.add_command(order_cancel)
order.add_command(order_status)
order.add_command(order_show)
order.add_command(order_list)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_stock)
product.add_command(product_quantity)
user.add_command(user_add)
discount.add_command(discount_create)
discount.add_command(discount_list)
discount.add_command(discount_apply)
discount.add_command(discount_sweep)
report.add_command(report_daily)
report.add_command(report_monthly)
report.add_command(report_total)
report.add_command(report_top)
report.add_command(report_list)
