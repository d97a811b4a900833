# ABOUTME: Rich table builders shared by the listing commands.
# ABOUTME: Renders catalog records and directory listings.

from collections.abc import Sequence

from rich.markup import escape
from rich.table import Table

from readshelf.catalog.types import BookMetadata, FileEntry
from readshelf.utils import format_date, format_size


def _progress(book: BookMetadata) -> str:
    if book.total_pages:
        return f"{book.last_read_position}/{book.total_pages}"
    return str(book.last_read_position) if book.last_read_position else "-"


def books_table(books: Sequence[BookMetadata]) -> Table:
    """Build a table with one row per book, ids shortened to 8 characters."""
    table = Table()
    table.add_column("ID", style="dim", width=8, no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Format", width=6)
    table.add_column("Size", justify="right")
    table.add_column("Added")
    table.add_column("Read", justify="right")

    for book in books:
        table.add_row(
            book.id[:8],
            escape(book.title),
            escape(book.author),
            str(book.format),
            format_size(book.size),
            format_date(book.added_date),
            _progress(book),
        )
    return table


def entries_table(entries: Sequence[FileEntry]) -> Table:
    """Build a numbered table of directory entries, numbering from 1."""
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("#", style="bold", justify="right", width=4)
    table.add_column("Name")

    for i, entry in enumerate(entries, start=1):
        name = escape(entry.name)
        if entry.is_directory:
            name = f"[blue]{name}/[/blue]"
        table.add_row(str(i), name)
    return table
