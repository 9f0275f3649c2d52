"""Summary commands."""

from decimal import Decimal

import click
from lumibiz.domain.summary import SummaryService
from lumibiz.cli.date_filters import (
    date_range_options,
    period_flags_from,
    resolve_cli_date_range,
)

LABEL_WIDTH = 20
VALUE_WIDTH = 16


def _money(amount: Decimal) -> str:
    return f"৳{amount:,.2f}"


def _display_totals(summary) -> None:
    """Display the summary cards."""
    rows = [
        ("Revenue", _money(summary.total_revenue)),
        ("Gross profit", _money(summary.total_profit)),
        ("Replace cost", _money(summary.replacement_cost)),
        ("Net munafa", _money(summary.net_profit)),
        ("Cost of goods", _money(summary.cost_of_goods)),
        ("Units sold", f"{summary.total_sold_units} pcs"),
        ("Replaced", f"{summary.total_replacements} pcs"),
    ]
    for label, value in rows:
        click.echo(f"{label:<{LABEL_WIDTH}} {value:>{VALUE_WIDTH}}")


def _display_breakdown(breakdown) -> None:
    """Display sold vs replaced units per category, in first-seen order."""
    click.echo(f"{'Bulb':<{LABEL_WIDTH}} {'Sold':>8} {'Replaced':>10}")
    click.echo("-" * (LABEL_WIDTH + 20))
    for category, counts in breakdown.items():
        click.echo(f"{category:<{LABEL_WIDTH}} {counts.sold:>8} {counts.replaced:>10}")


@click.command("summary")
@date_range_options
@click.pass_context
def summary(ctx, start_date: str, end_date: str, **periods):
    """Show revenue, profit and replacement totals.

    Also shows units sold and replaced per bulb type.
    """
    gateway = ctx.obj["gateway"]
    session = ctx.obj["session"]

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=period_flags_from(periods),
    )

    report = SummaryService().build_report(
        gateway.list_records(session), start_date=start, end_date=end
    )

    if start or end:
        click.echo(f"Period: {start or '...'} to {end or '...'}")
    click.echo(f"Records: {len(report.records)}")
    click.echo()
    _display_totals(report.summary)

    if report.breakdown:
        click.echo()
        _display_breakdown(report.breakdown)


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
