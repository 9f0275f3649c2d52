"""Main CLI entry point."""

import logging

import click
from lumibiz.domain.entities import Principal, SessionContext
from lumibiz.storage.factories import create_gateway

# Import and register all commands at module level
from lumibiz.cli.commands import (
    add,
    view,
    delete,
    summary,
    ask,
)


@click.group()
@click.option(
    "--store-path",
    type=click.Path(),
    help="Path to local store file (overrides LUMIBIZ_STORE_PATH environment variable)",
    envvar="LUMIBIZ_STORE_PATH",
)
@click.option(
    "--remote-url",
    help="SQLAlchemy URL of the remote store (overrides LUMIBIZ_REMOTE_URL)",
    envvar="LUMIBIZ_REMOTE_URL",
)
@click.option(
    "--user",
    help="Signed-in user id; records go to the remote store when one is configured",
    envvar="LUMIBIZ_USER",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, store_path: str | None, remote_url: str | None, user: str | None, verbose: bool):
    """Lumibiz - LED bulb sales and replacement ledger.

    Record sales and warranty replacements, review profit and loss, and ask
    the business assistant about your data.
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Set up storage only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        gateway = create_gateway(store_path=store_path, remote_url=remote_url)
        ctx.obj["gateway"] = gateway
        ctx.obj["session"] = SessionContext(
            principal=Principal(id=user) if user else None,
            remote_available=gateway.remote_store is not None,
        )


# Register all commands
add.register_commands(cli)
view.register_commands(cli)
delete.register_commands(cli)
summary.register_commands(cli)
ask.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
