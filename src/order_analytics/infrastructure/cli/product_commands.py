"""CLI commands for the Product aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from order_analytics.application.add_product import AddProductHandler
from order_analytics.application.list_products import ListProductsHandler
from order_analytics.application.update_product import UpdateProductHandler
from order_analytics.domain.exceptions import DomainException
from order_analytics.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--title", required=True, help="Product title.")
@click.option("--category", required=True, help="Product category.")
@click.option("--unit-price", required=True, help="Unit price (e.g. 15.00).")
@click.option("--cogs", required=True, help="Unit cost of goods sold (e.g. 6.50).")
@click.pass_obj
def product_add(
    data_file: Path, title: str, category: str, unit_price: str, cogs: str
) -> None:
    """Add a new product to the catalog."""
    try:
        handler = AddProductHandler(product_repo=product_repository(data_file))
        product = handler.handle(
            title=title, category=category, unit_price=unit_price, cogs=cogs
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.title}' added "
        f"at {product.unit_price} (COGS {product.cogs})"
    )


@click.command("list")
@click.pass_obj
def product_list(data_file: Path) -> None:
    """List all products in the catalog."""
    try:
        products = ListProductsHandler(product_repository(data_file)).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Title':<24} {'Category':<16} {'Price':>10} {'COGS':>10}")
    click.echo("-" * 70)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.title:<24} {p.category:<16} {p.unit_price:>10} {p.cogs:>10}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--title", default=None, help="New title.")
@click.option("--category", default=None, help="New category.")
@click.option("--unit-price", default=None, help="New unit price (e.g. 29.99).")
@click.option("--cogs", default=None, help="New unit COGS (e.g. 12.00).")
@click.pass_obj
def product_update(
    data_file: Path,
    product_id: int,
    title: str | None,
    category: str | None,
    unit_price: str | None,
    cogs: str | None,
) -> None:
    """Update a product.  Omitted fields keep their current values."""
    try:
        handler = UpdateProductHandler(product_repo=product_repository(data_file))
        product = handler.handle(
            product_id=product_id,
            title=title,
            category=category,
            unit_price=unit_price,
            cogs=cogs,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.title}' updated "
        f"(price {product.unit_price}, COGS {product.cogs})"
    )
