# ABOUTME: The `readshelf progress` command for recording the reading position.
# ABOUTME: Unknown ids are reported here even though the library ignores them.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from readshelf.cli.options import find_book, library_options, load_library
from readshelf.errors import LibraryError

console = Console()


@click.command("progress")
@click.argument("book_id")
@click.argument("position", type=click.IntRange(min=0))
@library_options
def progress(book_id: str, position: int, platform: str | None, data_dir: Path | None) -> None:
    """Set the last read position for a book."""
    library = load_library(console, platform, data_dir)
    record = find_book(library, book_id)

    if record is None:
        console.print(f"[red]Book {escape(book_id)} not found.[/red]")
        raise SystemExit(1)

    try:
        library.update_reading_position(record.id, position)
    except LibraryError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    updated = library.get(record.id)
    console.print(
        f"[bold]{escape(updated.title)}[/bold]: position {updated.last_read_position}"
    )
