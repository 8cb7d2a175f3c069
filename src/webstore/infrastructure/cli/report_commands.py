"""CLI commands for earnings reports."""

from __future__ import annotations

import click

from webstore.application.earnings import (
    DailyEarningsHandler,
    ListReportsHandler,
    MonthlyEarningsHandler,
    TopSellingProductsHandler,
    TotalEarningsHandler,
)
from webstore.domain.exceptions import DomainException
from webstore.infrastructure.bootstrap import unit_of_work
from webstore.infrastructure.cli.errors import DomainClickException


@click.command("daily")
def report_daily() -> None:
    """Today's earnings (saves a report snapshot)."""
    try:
        total = DailyEarningsHandler(unit_of_work()).handle()
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"Daily earnings: {total}")


@click.command("monthly")
@click.option("--month", required=True, type=int)
@click.option("--year", required=True, type=int)
def report_monthly(month: int, year: int) -> None:
    """Earnings for one month (saves a report snapshot)."""
    try:
        total = MonthlyEarningsHandler(unit_of_work()).handle(month, year)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"Earnings for {year}-{month:02d}: {total}")


@click.command("total")
def report_total() -> None:
    """All-time earnings."""
    try:
        total = TotalEarningsHandler(unit_of_work()).handle()
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"Total earnings: {total}")


@click.command("top")
@click.option("--count", "top_count", type=int, default=5, show_default=True)
def report_top(top_count: int) -> None:
    """Top-selling products by sales value."""
    try:
        rows = TopSellingProductsHandler(unit_of_work()).handle(top_count)
    except DomainException as exc:
        raise DomainClickException(exc)

    if not rows:
        click.echo("No completed sales yet.")
        return

    click.echo(f"{'ID':<6} {'Product':<20} {'Units':>7} {'Sales':>12}")
    click.echo("-" * 48)
    for row in rows:
        click.echo(f"{row.product_id:<6} {row.product_name:<20} {row.units_sold:>7} {row.total_sales:>12}")


@click.command("list")
def report_list() -> None:
    """List saved report snapshots."""
    try:
        reports = ListReportsHandler(unit_of_work()).handle()
    except DomainException as exc:
        raise DomainClickException(exc)

    if not reports:
        click.echo("No reports saved.")
        return

    click.echo(f"{'ID':<6} {'Generated':<21} {'Period':<10} {'Earnings':>12} {'Top':>6}")
    click.echo("-" * 59)
    for r in reports:
        period = "daily" if r.month == -1 else f"{r.year}-{r.month:02d}"
        top = r.top_selling_product_id if r.top_selling_product_id is not None else "-"
        click.echo(f"{r.id:<6} {r.report_date:<21} {period:<10} {r.total_earnings:>12} {top:>6}")
