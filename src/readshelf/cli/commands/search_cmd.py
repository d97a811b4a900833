# ABOUTME: The `readshelf search` command for finding books by title or author.
# ABOUTME: Case-insensitive substring match, results in catalog order.

from pathlib import Path

import click
from rich.console import Console

from readshelf.cli.options import library_options, load_library
from readshelf.cli.tables import books_table

console = Console()


@click.command("search")
@click.argument("query")
@library_options
def search(query: str, platform: str | None, data_dir: Path | None) -> None:
    """Search the library catalog by title or author."""
    library = load_library(console, platform, data_dir)
    results = library.search(query)

    if not results:
        console.print("[yellow]No results found.[/yellow]")
        return

    console.print(books_table(results))
    console.print(f"\n[dim]{len(results)} result(s)[/dim]")
