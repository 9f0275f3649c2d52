"""Delete record command."""

import click
from lumibiz.domain.errors import DomainError
from lumibiz.domain.records import RecordService
from lumibiz.cli.error_handling import handle_record_error


@click.command("delete")
@click.argument("record_id")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_record(ctx, record_id: str, yes: bool):
    """Delete a record by ID.

    Records cannot be edited; to correct one, delete it and add it again.
    Deleting an unknown ID does nothing.
    """
    service = RecordService(ctx.obj["gateway"])
    session = ctx.obj["session"]

    if not yes:
        click.confirm(f"Are you sure you want to delete record {record_id}?", abort=True)

    try:
        service.delete_record(session, record_id)
    except DomainError as e:
        handle_record_error(ctx, e)
        return

    click.echo(f"Deleted record {record_id}")


def register_commands(cli):
    """Register delete command with main CLI."""
    cli.add_command(delete_record)
