"""Add record command."""

import click
from lumibiz.domain.errors import DomainError
from lumibiz.domain.records import RecordService
from lumibiz.cli.error_handling import handle_record_error
from lumibiz.utils.date_parser import parse_record_date
from lumibiz.utils.amount_parser import parse_amount


@click.command("add")
@click.option("--shop", required=True, help="Shop name")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Record date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--category", default="9W", show_default=True, help="Bulb type, e.g. 9W or 12W")
@click.option("--quantity", type=int, default=1, show_default=True, help="Number of units")
@click.option("--cost-price", default="80", show_default=True, help="Buying price per unit")
@click.option("--sell-price", default="120", show_default=True, help="Selling price per unit")
@click.option(
    "--type",
    "kind",
    type=click.Choice(["sale", "replacement"], case_sensitive=False),
    default="sale",
    show_default=True,
    help="SALE or warranty REPLACEMENT",
)
@click.option("--notes", default="", help="Notes")
@click.pass_context
def add_record(
    ctx,
    shop: str,
    date: str,
    category: str,
    quantity: int,
    cost_price: str,
    sell_price: str,
    kind: str,
    notes: str,
):
    """Record a sale or a warranty replacement.

    Examples:
        lumibiz add --shop "Rahim Electronics" --quantity 3
        lumibiz add --shop "Rahim Electronics" --type replacement --category 12W
    """
    gateway = ctx.obj["gateway"]
    session = ctx.obj["session"]
    service = RecordService(gateway)

    try:
        record_date = parse_record_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        cost = parse_amount(cost_price)
        sell = parse_amount(sell_price)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        draft = service.build_draft(
            date=record_date,
            shop_name=shop,
            category=category,
            quantity=quantity,
            cost_price=cost,
            sell_price=sell,
            kind=kind,
            notes=notes,
        )
        record = service.create_record(session, draft)
    except DomainError as e:
        handle_record_error(ctx, e)
        return

    click.echo(f"Created record {record.id}")
    click.echo(f"  Type: {record.kind.value}")
    click.echo(f"  Date: {record.date}")
    click.echo(f"  Shop: {record.shop_name}")
    click.echo(f"  Category: {record.category}")
    click.echo(f"  Quantity: {record.quantity}")
    click.echo(f"  Cost price: ৳{record.cost_price:,.2f}")
    click.echo(f"  Sell price: ৳{record.sell_price:,.2f}")
    if record.notes:
        click.echo(f"  Notes: {record.notes}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_record)
