# ABOUTME: The `pubcore format` command for classifying a publication format.
# ABOUTME: Resolves MIME type candidates and an optional extension to a Format.

import json as json_lib

import click
from rich.console import Console

from pubcore.cli.options import json_option
from pubcore.publication.format import Format

console = Console()


@click.command("format")
@click.option(
    "--mime",
    "mimetypes",
    multiple=True,
    help="MIME type candidate, tried in the order given. Repeatable.",
)
@click.option(
    "--ext",
    "file_extension",
    default=None,
    help="File extension used when no MIME type is recognized.",
)
@json_option
def format_(mimetypes: tuple[str, ...], file_extension: str | None, json_output: bool) -> None:
    """Classify a publication format from MIME types and a file extension."""
    if not mimetypes and not file_extension:
        console.print("[red]Error:[/red] give at least one --mime or --ext.")
        raise SystemExit(1)

    fmt = Format.resolve(list(mimetypes), file_extension)

    if json_output:
        click.echo(json_lib.dumps({"format": fmt.value}))
        return

    style = "dim" if fmt is Format.UNKNOWN else "bold"
    console.print(f"[{style}]{fmt.value}[/{style}]")
