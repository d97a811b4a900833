# ABOUTME: Shared Click options and helpers for ReadShelf CLI commands.
# ABOUTME: Provides --platform/--data-dir flags and book id resolution.

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.markup import escape

from readshelf.catalog.types import BookMetadata
from readshelf.core.library import Library, open_library
from readshelf.errors import LibraryError
from readshelf.storage.paths import DATA_DIR_ENV_VAR, PLATFORM_ENV_VAR, PLATFORMS

platform_option = click.option(
    "--platform",
    type=click.Choice(sorted(PLATFORMS)),
    envvar=PLATFORM_ENV_VAR,
    default=None,
    help=f"Platform layout to use (default: desktop, or ${PLATFORM_ENV_VAR}).",
)

data_dir_option = click.option(
    "--data-dir",
    "data_dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENV_VAR,
    default=None,
    help="Application data directory for the desktop platform.",
)


def library_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach --platform and --data-dir to a command."""
    return platform_option(data_dir_option(func))


def load_library(console: Console, platform: str | None, data_dir: Path | None) -> Library:
    """Open the library, exiting with status 1 on configuration errors."""
    try:
        library = open_library(platform, data_dir)
    except LibraryError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    if library.error:
        console.print(f"[yellow]Warning:[/yellow] {escape(library.error)}")
    return library


def find_book(library: Library, book_id: str) -> BookMetadata | None:
    """Look up a book by full id or by an unambiguous, non-empty id prefix."""
    if not book_id:
        return None
    record = library.get(book_id)
    if record is not None:
        return record
    matches = [book for book in library.books if book.id.startswith(book_id)]
    return matches[0] if len(matches) == 1 else None
