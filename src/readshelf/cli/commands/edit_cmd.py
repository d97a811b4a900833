# ABOUTME: The `readshelf edit` command for changing a book's title, author, or page count.
# ABOUTME: Only the fields given on the command line are changed.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from readshelf.cli.options import find_book, library_options, load_library
from readshelf.errors import LibraryError

console = Console()


@click.command("edit")
@click.argument("book_id")
@click.option("--title", default=None, help="New title.")
@click.option("--author", default=None, help="New author.")
@click.option("--pages", "total_pages", type=click.IntRange(min=0), default=None,
              help="Total page count.")
@library_options
def edit(
    book_id: str,
    title: str | None,
    author: str | None,
    total_pages: int | None,
    platform: str | None,
    data_dir: Path | None,
) -> None:
    """Edit the details of a book by ID."""
    if title is None and author is None and total_pages is None:
        console.print("[yellow]Nothing to change.[/yellow]")
        return

    library = load_library(console, platform, data_dir)
    record = find_book(library, book_id)

    if record is None:
        console.print(f"[red]Book {escape(book_id)} not found.[/red]")
        raise SystemExit(1)

    try:
        updated = library.update_details(
            record.id, title=title, author=author, total_pages=total_pages,
        )
    except LibraryError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    console.print(f"Updated [bold]{escape(updated.title)}[/bold] by {escape(updated.author)}.")
