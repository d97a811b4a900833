# ABOUTME: The `readshelf rm` command for removing a book from the catalog.
# ABOUTME: Also deletes the managed copy of the file when there is one.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from readshelf.cli.options import find_book, library_options, load_library
from readshelf.errors import LibraryError

console = Console()


@click.command("rm")
@click.argument("book_id")
@library_options
def rm(book_id: str, platform: str | None, data_dir: Path | None) -> None:
    """Remove a book by ID."""
    library = load_library(console, platform, data_dir)
    record = find_book(library, book_id)

    if record is None:
        console.print(f"[red]Book {escape(book_id)} not found.[/red]")
        raise SystemExit(1)

    try:
        library.remove(record.id)
    except LibraryError as exc:
        console.print(f"[red]Failed to remove:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    console.print(f"Removed [bold]{escape(record.title)}[/bold].")
