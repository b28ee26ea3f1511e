#!/usr/bin/env python3
"""Command-line interface for include-block."""

import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import get_settings
from .constants import SUPPORTED_FILE_TYPES, __app_name__, __version__
from .exceptions import IncludeError
from .include import include_file

console = Console()
error_console = Console(stderr=True)


@click.group()
@click.version_option(__version__, prog_name=__app_name__)
@click.option('--debug', is_flag=True, help='Log extraction details')
def cli(debug: bool):
    """include-block - Extract named code blocks from documentation."""
    get_settings().setup_logging()
    if debug:
        logging.getLogger("include_block").setLevel(logging.DEBUG)


@cli.command()
@click.argument("path")
@click.argument("name")
@click.option("--dialect", "-d", help="Document dialect (default: from the file extension)")
@click.option("--scope", is_flag=True, help="Wrap the block in braces")
@click.option("--language", "-l", help="Only match blocks with this language tag")
@click.option("--root", type=click.Path(file_okay=False), help="Directory PATH is relative to")
@click.option(
    "--relative-to",
    "relative_to",
    type=click.Path(dir_okay=False),
    help="Resolve PATH relative to the directory of this file instead of the root",
)
def extract(
    path: str,
    name: str,
    dialect: str | None,
    scope: bool,
    language: str | None,
    root: str | None,
    relative_to: str | None,
):
    """Print the block NAME from the document at PATH."""
    try:
        content = include_file(
            path,
            name,
            dialect=dialect,
            scope=scope,
            relative=relative_to is not None,
            language=language,
            root=root,
            caller=relative_to,
        )
    except (IncludeError, OSError) as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)

    click.echo(content)


@cli.command()
def dialects():
    """List the supported dialects."""
    table = Table(title="Supported Dialects")
    table.add_column("Dialect", style="cyan")
    table.add_column("Extensions", style="green")
    table.add_column("Aliases")
    table.add_column("Description")

    for dialect, file_type in SUPPORTED_FILE_TYPES.items():
        table.add_row(
            dialect,
            ", ".join(file_type['extensions']),
            ", ".join(file_type['aliases']) or "-",
            file_type['description'],
        )

    console.print(table)


if __name__ == "__main__":
    cli()
