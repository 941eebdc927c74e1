# ABOUTME: The `pubcore identify` command for classifying files in a directory tree.
# ABOUTME: Reports per-format counts and the files that resolved to a known format.

import json as json_lib
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pubcore.cli.options import json_option
from pubcore.core.identify import IdentifyResult, identify_directory

console = Console()


@click.command("identify")
@click.argument(
    "path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@json_option
def identify(path: Path, json_output: bool) -> None:
    """Classify every file under a directory by publication format."""
    result = identify_directory(path)

    if json_output:
        _print_json(result, path)
        return

    _print_rich(result, path)


def _print_json(result: IdentifyResult, path: Path) -> None:
    """Print identify results as JSON."""
    data = {
        "scan_root": str(path),
        "total_files": result.total_files,
        "format_counts": result.format_counts,
        "files": [
            {"path": str(entry.path), "format": entry.format.value}
            for entry in result.files
        ],
    }
    click.echo(json_lib.dumps(data, indent=2))


def _print_rich(result: IdentifyResult, path: Path) -> None:
    """Print identify results with Rich formatting."""
    if result.total_files == 0:
        console.print(f"[dim]0 file(s) scanned in {path}[/dim]")
        return

    table = Table(title="Format Summary")
    table.add_column("Format", style="bold")
    table.add_column("Count", justify="right")

    for fmt in sorted(result.format_counts):
        table.add_row(fmt, str(result.format_counts[fmt]))

    console.print(table)

    publications = [entry for entry in result.files if entry.is_publication]
    console.print(
        f"\n[bold]{result.total_files} file(s) scanned, "
        f"{len(publications)} publication(s) found.[/bold]"
    )
    for entry in publications:
        console.print(f"  {escape(str(entry.path.relative_to(path)))} ({entry.format.value})")
