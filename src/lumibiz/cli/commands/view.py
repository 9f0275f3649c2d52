"""Record viewing commands."""

import click
from lumibiz.domain.records import RecordService
from lumibiz.cli.date_filters import (
    date_range_options,
    period_flags_from,
    resolve_cli_date_range,
)


@click.command("view")
@date_range_options
@click.option("--verbose", "-v", is_flag=True, help="Show all fields including notes")
@click.pass_context
def view_records(ctx, start_date: str, end_date: str, verbose: bool, **periods):
    """View records with optional date filters.

    Records are listed newest first. Use --verbose to show notes.
    """
    service = RecordService(ctx.obj["gateway"])
    session = ctx.obj["session"]

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=period_flags_from(periods),
    )
    records = service.list_records(session, start_date=start, end_date=end)

    if not records:
        click.echo("No records found.")
        return

    click.echo(f"\nFound {len(records)} record(s):")
    if verbose:
        click.echo("=" * 100)
        for record in records:
            click.echo(f"\nRecord ID: {record.id}")
            click.echo(f"  Date: {record.date}")
            click.echo(f"  Type: {record.kind.value}")
            click.echo(f"  Shop: {record.shop_name}")
            click.echo(f"  Category: {record.category}")
            click.echo(f"  Quantity: {record.quantity}")
            click.echo(f"  Cost price: ৳{record.cost_price:,.2f}")
            click.echo(f"  Sell price: ৳{record.sell_price:,.2f}")
            if record.notes:
                click.echo(f"  Notes: {record.notes}")
            click.echo("-" * 100)
        return

    click.echo("-" * 130)
    click.echo(
        f"{'ID':<36} {'Date':<12} {'Type':<12} {'Shop':<25} {'Bulb':<8} {'Qty':>5} {'Cost':>10} {'Sell':>10}"
    )
    click.echo("-" * 130)
    for record in records:
        click.echo(
            f"{record.id:<36} {record.date:<12} {record.kind.value:<12} {record.shop_name[:25]:<25} "
            f"{record.category[:8]:<8} {record.quantity:>5} {record.cost_price:>10,.2f} {record.sell_price:>10,.2f}"
        )


def register_commands(cli):
    """Register view command with main CLI."""
    cli.add_command(view_records)
