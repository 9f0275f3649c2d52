"""Assistant commands."""

import mimetypes
from pathlib import Path

import click
from lumibiz.assistant import AssistantClient


@click.command("ask")
@click.argument("query", nargs=-1, required=True)
@click.option("--deep", is_flag=True, help="Deep analysis of trends, replacement rates and pricing")
@click.pass_context
def ask(ctx, query: tuple[str, ...], deep: bool):
    """Ask the business assistant about your records.

    Examples:
        lumibiz ask "Which shop had the most replacements?"
        lumibiz ask --deep "How can I improve my munafa?"
    """
    records = ctx.obj["gateway"].list_records(ctx.obj["session"])
    answer = AssistantClient().ask(" ".join(query), records, deep_analysis=deep)
    click.echo(answer)


@click.command("analyze-image")
@click.argument("image_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--prompt", default="", help="What to look for in the image")
def analyze_image(image_path: Path, prompt: str):
    """Ask the assistant to analyze a photo (product box, receipt, ...)."""
    mime_type, _ = mimetypes.guess_type(image_path.name)
    if mime_type is None or not mime_type.startswith("image/"):
        raise click.BadParameter(f"'{image_path}' is not a recognized image file", param_hint="IMAGE_PATH")

    answer = AssistantClient().analyze_image(image_path.read_bytes(), mime_type, prompt)
    click.echo(answer)


def register_commands(cli):
    """Register assistant commands with main CLI."""
    cli.add_command(ask)
    cli.add_command(analyze_image)
