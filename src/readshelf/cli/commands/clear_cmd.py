# ABOUTME: The `readshelf clear` command for emptying the catalog.
# ABOUTME: Managed copies of book files are left on disk.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from readshelf.cli.options import library_options, load_library
from readshelf.errors import LibraryError

console = Console()


@click.command("clear")
@click.confirmation_option(prompt="Remove every book from the catalog?")
@library_options
def clear(platform: str | None, data_dir: Path | None) -> None:
    """Remove all books from the catalog."""
    library = load_library(console, platform, data_dir)
    count = len(library.books)

    try:
        library.clear()
    except LibraryError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    console.print(f"Cleared {count} book(s).")
