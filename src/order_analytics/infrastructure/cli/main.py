from __future__ import annotations

from pathlib import Path

import click

from order_analytics.infrastructure.cli.analytics_commands import analytics_show
from order_analytics.infrastructure.cli.order_commands import order_list
from order_analytics.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update,
)
from order_analytics.infrastructure.config import Settings
from order_analytics.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON file holding products and orders.",
)
@click.option("-v", "--verbose", count=True, help="Log more (-v info, -vv debug).")
@click.pass_context
def cli(ctx: click.Context, data_file: Path | None, verbose: int) -> None:
    """Order Analytics: product catalog and order profitability."""
    settings = Settings.from_env()
    if verbose >= 2:
        level = "DEBUG"
    elif verbose == 1:
        level = "INFO"
    else:
        level = settings.log_level
    configure_logging(level)
    ctx.obj = data_file or settings.data_file


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def order() -> None:
    """Inspect orders."""


@cli.group()
def analytics() -> None:
    """Order profitability."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
order.add_command(order_list)
analytics.add_command(analytics_show)
