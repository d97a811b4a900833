# ABOUTME: The `readshelf ls` command for listing cataloged books.
# ABOUTME: Displays a Rich table of every book in catalog order.

from pathlib import Path

import click
from rich.console import Console

from readshelf.cli.options import library_options, load_library
from readshelf.cli.tables import books_table

console = Console()


@click.command("ls")
@library_options
def ls(platform: str | None, data_dir: Path | None) -> None:
    """List all books in the library catalog."""
    library = load_library(console, platform, data_dir)
    books = library.books

    if not books:
        console.print("[yellow]No books in the library.[/yellow]")
        return

    console.print(books_table(books))
    console.print(f"\n[dim]{len(books)} book(s)[/dim]")
