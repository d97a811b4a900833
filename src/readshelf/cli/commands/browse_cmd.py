# ABOUTME: The `readshelf browse` command for adding a book by walking directories.
# ABOUTME: Starts at the platform's default browse location.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from readshelf.cli.browse import BrowseSession
from readshelf.cli.options import library_options, load_library
from readshelf.errors import LibraryError

console = Console()


@click.command("browse")
@library_options
def browse(platform: str | None, data_dir: Path | None) -> None:
    """Browse the filesystem and pick a book to add."""
    library = load_library(console, platform, data_dir)
    session = BrowseSession(library, console=console)

    try:
        record = session.run()
    except LibraryError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    if record is None:
        console.print("[dim]Cancelled.[/dim]")
        return

    console.print(f"[green]Added:[/green] {escape(record.title)} [dim]({record.id[:8]})[/dim]")
