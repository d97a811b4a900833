# ABOUTME: The Library owns the in-memory catalog and every operation that reads or mutates it.
# ABOUTME: Mutations persist synchronously; failures are kept in a sticky last-error slot.

import dataclasses
import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from readshelf.catalog.types import BookMetadata, FileEntry, FilePayload
from readshelf.core.browser import DirectoryBrowser
from readshelf.core.importer import ingest_path, ingest_payload
from readshelf.core.picker import FilePicker
from readshelf.errors import (
    BookNotFoundError,
    CatalogIOError,
    ConfigurationError,
    LibraryError,
    ValidationError,
)
from readshelf.storage.paths import PlatformPaths, resolve_platform
from readshelf.storage.store import CatalogStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LibrarySnapshot:
    """Read-only view of the library for rendering."""

    books: tuple[BookMetadata, ...]
    error: str | None
    browsing: bool
    current_path: Path
    file_list: tuple[FileEntry, ...]


class Library:
    """A personal ebook catalog bound to one platform.

    The catalog is loaded once at construction. A load failure is logged and
    recorded as the last error, and the library starts empty.

    Operations raise LibraryError subclasses. Before raising, the message is
    stored in ``error``, which stays set until ``clear_error`` is called.
    """

    def __init__(self, paths: PlatformPaths, store: CatalogStore | None = None) -> None:
        self._paths = paths
        self._store = store or CatalogStore(paths)
        self._books: list[BookMetadata] = []
        self._error: str | None = None
        self._browser = DirectoryBrowser(paths.default_browse_path, self._set_error)

        try:
            self._books = self._store.load()
        except LibraryError as exc:
            logger.error("Failed to load library: %s", exc)
            self._error = str(exc)

    # --- State ---

    @property
    def books(self) -> tuple[BookMetadata, ...]:
        return tuple(dataclasses.replace(book) for book in self._books)

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def supports_filesystem(self) -> bool:
        return self._paths.supports_filesystem

    def _set_error(self, message: str) -> None:
        self._error = message

    @contextmanager
    def _reporting(self) -> Iterator[None]:
        try:
            yield
        except LibraryError as exc:
            self._error = str(exc)
            raise

    def _persist(self) -> None:
        self._store.save(self._books)

    def clear_error(self) -> None:
        """Dismiss the last error without touching anything else."""
        self._error = None

    def snapshot(self) -> LibrarySnapshot:
        return LibrarySnapshot(
            books=tuple(dataclasses.replace(book) for book in self._books),
            error=self._error,
            browsing=self._browser.browsing,
            current_path=self._browser.current_path,
            file_list=tuple(self._browser.entries),
        )

    # --- Ingestion ---

    def add_from_path(self, source: Path) -> BookMetadata:
        """Copy a local file into managed storage and catalog it.

        Raises:
            ConfigurationError: If the platform has no managed storage directory.
            UnsupportedFormatError: If the file extension is not supported.
            CatalogIOError: If copying or persisting fails.
        """
        with self._reporting():
            storage_dir = self._paths.storage_path()
            if storage_dir is None:
                raise ConfigurationError("No managed storage directory on this platform")

            record = ingest_path(source, storage_dir)
            self._books.append(record)
            self._persist()

        logger.info("Book added successfully: %s", record.id)
        return dataclasses.replace(record)

    def _add_payload(self, payload: FilePayload) -> BookMetadata:
        record = ingest_payload(payload, self._books)
        self._books.append(record)
        self._persist()
        logger.info("Book added successfully: %s", record.id)
        return dataclasses.replace(record)

    def add_from_payload(self, payload: FilePayload) -> BookMetadata:
        """Catalog an in-memory payload with its content stored inline.

        Raises:
            PayloadTooLargeError: If the payload exceeds 50 MiB.
            UnsupportedFormatError: If no supported format can be detected.
            DuplicateBookError: If a book with the same name and size exists.
            CatalogIOError: If persisting fails.
        """
        with self._reporting():
            return self._add_payload(payload)

    def add_multiple(self, payloads: Sequence[FilePayload]) -> list[str]:
        """Catalog each payload independently.

        Failures do not stop the batch and do not touch the last-error slot.

        Returns:
            One ``"<name>: <reason>"`` message per failed payload.
        """
        errors: list[str] = []
        for payload in payloads:
            try:
                self._add_payload(payload)
            except LibraryError as exc:
                errors.append(f"{payload.name}: {exc}")
        return errors

    async def add_from_selection(self, picker: FilePicker) -> list[str]:
        """Await a file picker and catalog whatever it returns.

        An empty selection means the user cancelled; nothing happens.
        """
        payloads = await picker.select_files()
        if not payloads:
            logger.info("File selection cancelled")
            return []
        return self.add_multiple(payloads)

    # --- Queries ---

    def search(self, query: str) -> list[BookMetadata]:
        """Case-insensitive substring search over title and author, in catalog order."""
        needle = query.lower()
        return [
            dataclasses.replace(book)
            for book in self._books
            if needle in book.title.lower() or needle in book.author.lower()
        ]

    def _find(self, book_id: str) -> BookMetadata | None:
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def get(self, book_id: str) -> BookMetadata | None:
        """Retrieve a copy of a book by id, or None if it is not cataloged.

        Records handed out are copies; change them through the Library's
        methods so the catalog is saved.
        """
        record = self._find(book_id)
        return dataclasses.replace(record) if record is not None else None

    # --- Mutations ---

    def remove(self, book_id: str) -> None:
        """Remove a book and delete its managed copy if one exists.

        Raises:
            BookNotFoundError: If the id is not cataloged.
            CatalogIOError: If the managed copy cannot be deleted or persisting fails.
        """
        with self._reporting():
            record = self._find(book_id)
            if record is None:
                raise BookNotFoundError(f"Book {book_id} not found")

            file_path = record.file_path
            if file_path is not None and file_path.exists():
                try:
                    file_path.unlink()
                except OSError as exc:
                    raise CatalogIOError(f"Failed to delete file: {exc}") from exc

            self._books = [book for book in self._books if book.id != book_id]
            self._persist()

        logger.info("Book removed successfully: %s", book_id)

    def update_reading_position(self, book_id: str, position: int) -> None:
        """Record how far a book has been read.

        Unknown ids are ignored. When the page count is known the position is
        clamped to it; while it is 0 (unknown) the position is stored as given.

        Raises:
            ValidationError: If the position is negative for a cataloged book.
            CatalogIOError: If persisting fails.
        """
        with self._reporting():
            record = self._find(book_id)
            if record is None:
                return
            if position < 0:
                raise ValidationError(f"Reading position must not be negative: {position}")

            if record.total_pages > 0:
                position = min(position, record.total_pages)
            record.last_read_position = position
            self._persist()

    def update_details(
        self,
        book_id: str,
        *,
        title: str | None = None,
        author: str | None = None,
        total_pages: int | None = None,
    ) -> BookMetadata:
        """Edit a book's display fields or page count.

        Raises:
            BookNotFoundError: If the id is not cataloged.
            ValidationError: If total_pages is negative.
            CatalogIOError: If persisting fails.
        """
        with self._reporting():
            record = self._find(book_id)
            if record is None:
                raise BookNotFoundError(f"Book {book_id} not found")
            if total_pages is not None and total_pages < 0:
                raise ValidationError(f"Page count must not be negative: {total_pages}")

            if title is not None:
                record.title = title
            if author is not None:
                record.author = author
            if total_pages is not None:
                record.total_pages = total_pages
            self._persist()
        return dataclasses.replace(record)

    def clear(self) -> None:
        """Empty the catalog. Managed copies stay on disk."""
        with self._reporting():
            self._books.clear()
            self._persist()
        logger.info("Library cleared")

    # --- Directory browsing ---

    @property
    def browsing(self) -> bool:
        return self._browser.browsing

    @property
    def current_path(self) -> Path:
        return self._browser.current_path

    @property
    def file_list(self) -> tuple[FileEntry, ...]:
        return tuple(self._browser.entries)

    def start_browsing(self) -> None:
        """Open the directory browser at the platform's default location.

        Raises:
            ConfigurationError: If the platform exposes no filesystem.
        """
        with self._reporting():
            if not self._paths.supports_filesystem:
                raise ConfigurationError("Directory browsing is not available on this platform")
            self._browser.start()

    def cancel_browsing(self) -> None:
        self._browser.cancel()

    def go_up(self) -> None:
        self._browser.go_up()

    def enter_directory(self, index: int) -> None:
        self._browser.enter_directory(index)

    def select_file(self, index: int) -> BookMetadata | None:
        """Ingest the file at ``index`` of the current listing.

        On success the browser returns to idle. On failure the error is kept
        in ``error`` and browsing continues so another file can be picked.
        Directories and out-of-range indexes are ignored.
        """
        entry = self._browser.file_at(index)
        if entry is None:
            return None

        try:
            record = self.add_from_path(entry.path)
        except LibraryError as exc:
            logger.warning("Could not add %s: %s", entry.path, exc)
            return None

        self._browser.finish()
        return record


def open_library(platform: str | None = None, data_dir: Path | None = None) -> Library:
    """Open the library for a platform.

    Args:
        platform: Platform name (desktop, android, web). Defaults to
            $READSHELF_PLATFORM, then desktop.
        data_dir: Override for the desktop application directory.

    Raises:
        ConfigurationError: If the platform name is unknown.
    """
    return Library(resolve_platform(platform, data_dir=data_dir))
