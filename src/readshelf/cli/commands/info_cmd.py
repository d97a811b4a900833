# ABOUTME: The `readshelf info` command for displaying a single book's record.
# ABOUTME: Shows every stored field for a book by id or id prefix.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from readshelf.cli.options import find_book, library_options, load_library
from readshelf.utils import format_date, format_size

console = Console()


@click.command("info")
@click.argument("book_id")
@library_options
def info(book_id: str, platform: str | None, data_dir: Path | None) -> None:
    """Show detailed metadata for a book by ID."""
    library = load_library(console, platform, data_dir)
    record = find_book(library, book_id)

    if record is None:
        console.print(f"[red]Book {escape(book_id)} not found.[/red]")
        raise SystemExit(1)

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("ID", record.id)
    table.add_row("Title", escape(record.title))
    table.add_row("Author", escape(record.author))
    table.add_row("Format", str(record.format))
    table.add_row("File", escape(record.file_name))
    table.add_row("Size", format_size(record.size))
    if record.file_path is not None:
        table.add_row("Stored at", escape(str(record.file_path)))
    else:
        table.add_row("Stored at", "inline")
    if record.cover_image:
        table.add_row("Cover", escape(record.cover_image))
    table.add_row("Position", str(record.last_read_position))
    table.add_row("Pages", str(record.total_pages) if record.total_pages else "unknown")
    table.add_row("Added", format_date(record.added_date))

    console.print(table)
