"""Reporting of record errors raised under CLI commands."""

import click

from lumibiz.domain.errors import DomainError, StorageError


def handle_record_error(ctx: click.Context, error: DomainError) -> None:
    """Print a record error to stderr and exit with failure.

    Validation errors are printed as is. A storage error means the remote
    store refused the change and rolled it back, so the user is told that
    nothing was saved and that the command can be repeated.
    """
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, StorageError):
        session = (ctx.obj or {}).get("session")
        user = session.principal if session is not None else None
        owner = f" for {user.id}" if user is not None else ""
        click.echo(f"No changes were made to the remote store{owner}; try again.", err=True)
    ctx.exit(1)
