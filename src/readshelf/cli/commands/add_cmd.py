# ABOUTME: The `readshelf add` command for ingesting book files.
# ABOUTME: Copies files into managed storage, or embeds them inline with --inline.

import asyncio
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from readshelf.cli.options import library_options, load_library
from readshelf.core.library import Library
from readshelf.core.picker import PathListPicker
from readshelf.errors import LibraryError

console = Console()


def _add_copies(library: Library, files: tuple[Path, ...]) -> list[str]:
    errors: list[str] = []
    for path in files:
        try:
            record = library.add_from_path(path)
        except LibraryError as exc:
            errors.append(f"{path.name}: {exc}")
            continue
        console.print(f"  [green]Added:[/green] {escape(path.name)} [dim]({record.id[:8]})[/dim]")
    return errors


@click.command("add")
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--inline/--copy",
    "inline",
    default=False,
    help="Embed file content in the catalog instead of copying to managed storage.",
)
@library_options
def add(
    files: tuple[Path, ...], inline: bool, platform: str | None, data_dir: Path | None,
) -> None:
    """Add one or more ebook files (EPUB, PDF, TXT) to the library."""
    library = load_library(console, platform, data_dir)
    before = len(library.books)

    if inline or not library.supports_filesystem:
        try:
            errors = asyncio.run(library.add_from_selection(PathListPicker(files)))
        except OSError as exc:
            console.print(f"[red]Error:[/red] {escape(str(exc))}")
            raise SystemExit(1) from exc
    else:
        errors = _add_copies(library, files)

    added = len(library.books) - before
    parts = []
    if added:
        parts.append(f"[green]{added} added[/green]")
    if errors:
        parts.append(f"[red]{len(errors)} error(s)[/red]")
    console.print(", ".join(parts))

    for message in errors:
        console.print(f"  [dim]{escape(message)}[/dim]")

    if errors:
        raise SystemExit(1)
