# ABOUTME: Directory browser for picking a book file on filesystem-capable platforms.
# ABOUTME: Lists directories and ebook files, directories first, and tracks navigation state.

import logging
from collections.abc import Callable
from pathlib import Path

from readshelf.catalog.types import EBOOK_EXTENSIONS, FileEntry

logger = logging.getLogger(__name__)


def is_ebook_file(path: Path) -> bool:
    """Check whether a path has a supported ebook extension (any case)."""
    return path.suffix.lower() in EBOOK_EXTENSIONS


def list_directory(directory: Path) -> list[FileEntry]:
    """List the navigable directories and ebook files in a directory.

    Directories come first, then files; each group is sorted by name
    without case folding.

    Raises:
        OSError: If the directory cannot be read.
    """
    entries: list[FileEntry] = []
    for path in directory.iterdir():
        is_directory = path.is_dir()
        if is_directory or is_ebook_file(path):
            entries.append(FileEntry(name=path.name, path=path, is_directory=is_directory))

    entries.sort(key=lambda entry: (not entry.is_directory, entry.name))
    return entries


class DirectoryBrowser:
    """Navigation state for choosing a file.

    The browser is either idle or browsing. Listing failures are reported
    through ``report_error`` and leave an empty listing.
    """

    def __init__(
        self,
        start_path: Callable[[], Path],
        report_error: Callable[[str], None],
    ) -> None:
        self._start_path = start_path
        self._report_error = report_error
        self.browsing = False
        self.current_path = Path(".")
        self.entries: list[FileEntry] = []

    def start(self) -> None:
        """Enter browsing mode at the default browse directory."""
        self.current_path = self._start_path()
        self.browsing = True
        self.reload()

    def reload(self) -> None:
        """Re-read the current directory."""
        logger.info("Loading files from: %s", self.current_path)
        try:
            self.entries = list_directory(self.current_path)
        except OSError as exc:
            self.entries = []
            self._report_error(f"Cannot read directory: {exc}")
            return
        logger.info("Loaded %d items", len(self.entries))

    def go_up(self) -> None:
        """Move to the parent directory; no-op at a filesystem root."""
        parent = self.current_path.parent
        if parent == self.current_path:
            return
        self.current_path = parent
        self.reload()

    def entry_at(self, index: int) -> FileEntry | None:
        if 0 <= index < len(self.entries):
            return self.entries[index]
        return None

    def enter_directory(self, index: int) -> None:
        """Open the directory at ``index``; no-op for files or bad indexes."""
        entry = self.entry_at(index)
        if entry is None or not entry.is_directory:
            return
        self.current_path = entry.path
        self.reload()

    def file_at(self, index: int) -> FileEntry | None:
        """Return the file entry at ``index``, or None for directories and bad indexes."""
        entry = self.entry_at(index)
        if entry is None or entry.is_directory:
            return None
        return entry

    def finish(self) -> None:
        """Return to idle after a successful selection."""
        self.browsing = False

    def cancel(self) -> None:
        """Discard the listing and return to idle."""
        self.browsing = False
        self.entries = []
