"""CLI commands for orders (read-only)."""

from __future__ import annotations

from pathlib import Path

import click

from order_analytics.application.dto import format_currency
from order_analytics.application.list_orders import ListOrdersHandler
from order_analytics.domain.exceptions import DomainException
from order_analytics.infrastructure.bootstrap import order_repository


@click.command("list")
@click.pass_obj
def order_list(data_file: Path) -> None:
    """List all orders with their adjustments."""
    try:
        orders = ListOrdersHandler(order_repository(data_file)).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(
        f"{'Order No.':<12} {'Items':>6} {'Discounts':>11} {'Taxes':>10} {'Shipping':>10}"
    )
    click.echo("-" * 53)
    for o in orders:
        click.echo(
            f"{o.order_no:<12} {o.item_count:>6} {format_currency(o.discounts):>11} "
            f"{format_currency(o.taxes):>10} {format_currency(o.shipping):>10}"
        )
