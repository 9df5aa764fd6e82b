"""CLI commands for order analytics."""

from __future__ import annotations

import json
from dataclasses import asdict
from decimal import Decimal
from pathlib import Path

import click

from order_analytics.application.dto import (
    AnalyticsReportDTO,
    format_currency,
    format_percentage,
)
from order_analytics.application.show_analytics import ShowAnalyticsHandler
from order_analytics.domain.exceptions import DomainException
from order_analytics.infrastructure.bootstrap import order_repository, product_repository

_MONEY_COLUMNS = (
    ("Gross Sales", "gross_sales"),
    ("Discounts", "discounts"),
    ("Taxes", "taxes"),
    ("Shipping", "shipping"),
    ("Sales", "sales"),
    ("Total COGS", "total_cogs"),
    ("Gross Profit", "gross_profit"),
)
_WIDTH = 13


@click.command("show")
@click.option("--order", "order_no", default=None, help="Only this order number.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the report as JSON.")
@click.pass_obj
def analytics_show(data_file: Path, order_no: str | None, as_json: bool) -> None:
    """Show gross sales, COGS, profit and margin per order, with totals.

    Figures are recomputed from the current product prices on every run.
    """
    handler = ShowAnalyticsHandler(
        order_repo=order_repository(data_file),
        product_repo=product_repository(data_file),
    )

    try:
        report = handler.handle(order_no=order_no)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        click.echo(json.dumps(asdict(report), indent=2, default=_decimal_to_json))
        return

    _display_report(report)


def _display_report(report: AnalyticsReportDTO) -> None:
    if not report.rows:
        click.echo("No orders found.")
        return

    header = f"{'Order No.':<12}" + "".join(f"{title:>{_WIDTH}}" for title, _ in _MONEY_COLUMNS)
    header += f"{'Gross Margin':>{_WIDTH}}  {'Band':<8}"
    rule = "-" * len(header)

    click.echo(header)
    click.echo(rule)
    for row in report.rows:
        click.echo(
            f"{row.order_no:<12}"
            + _money_cells(row)
            + f"{format_percentage(row.gross_margin):>{_WIDTH}}  {row.margin_band:<8}"
        )
    click.echo(rule)

    totals = report.totals
    click.echo(
        f"{'TOTALS':<12}"
        + _money_cells(totals)
        + f"{format_percentage(totals.gross_margin):>{_WIDTH}}"
    )
    click.echo()
    click.echo(f"{'Total Sales:':<16}{format_currency(totals.sales)}")
    click.echo(f"{'Total Profit:':<16}{format_currency(totals.gross_profit)}")
    click.echo(f"{'Overall Margin:':<16}{format_percentage(totals.gross_margin)}")


def _money_cells(row) -> str:
    return "".join(
        f"{format_currency(getattr(row, field)):>{_WIDTH}}" for _, field in _MONEY_COLUMNS
    )


def _decimal_to_json(value: object) -> float:
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
