# ABOUTME: Interactive directory browsing session for picking a book to add.
# ABOUTME: Shows the current listing in a Rich table and prompts for navigation.

import click
from rich.console import Console
from rich.markup import escape

from readshelf.catalog.types import BookMetadata
from readshelf.cli.tables import entries_table
from readshelf.core.library import Library

_PROMPT = "[N] Open/select  [u] Up  [c] Cancel"


class BrowseSession:
    """Drives the Library's directory browser from a terminal prompt.

    Numbers open a directory or add a file; errors are shown and dismissed so
    the user can pick again.
    """

    def __init__(self, library: Library, *, console: Console | None = None) -> None:
        self._library = library
        self._console = console or Console()

    def _render(self) -> None:
        self._console.print(f"\n[bold]{escape(str(self._library.current_path))}[/bold]")
        if self._library.file_list:
            self._console.print(entries_table(self._library.file_list))
        else:
            self._console.print("[dim]No ebook files found in this directory[/dim]")

    def _show_error(self) -> None:
        if self._library.error:
            self._console.print(f"[red]{escape(self._library.error)}[/red]")
            self._library.clear_error()

    def run(self) -> BookMetadata | None:
        """Browse until a file is added or the user cancels.

        Returns:
            The added book, or None if browsing was cancelled.
        """
        self._library.start_browsing()

        while self._library.browsing:
            self._render()
            self._show_error()

            choice = click.prompt(_PROMPT, type=str, default="c").strip().lower()

            if choice == "c":
                self._library.cancel_browsing()
                return None
            if choice == "u":
                self._library.go_up()
                continue

            try:
                index = int(choice) - 1
            except ValueError:
                continue

            entries = self._library.file_list
            if not 0 <= index < len(entries):
                continue
            if entries[index].is_directory:
                self._library.enter_directory(index)
                continue

            record = self._library.select_file(index)
            if record is not None:
                return record

        return None
