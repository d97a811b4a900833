# ABOUTME: Core data structures for the ReadShelf catalog.
# ABOUTME: BookMetadata is the only persisted entity; FileEntry and FilePayload are transient.

import base64
import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

UNKNOWN_AUTHOR = "Unknown Author"


class BookFormat(str, Enum):
    """Supported ebook formats. Values double as the persisted names."""

    EPUB = "EPUB"
    PDF = "PDF"
    TXT = "TXT"

    @property
    def extension(self) -> str:
        """Lowercase file extension without the leading dot."""
        return self.value.lower()

    @property
    def mime_type(self) -> str:
        return _FORMAT_MIME_TYPES[self]

    @classmethod
    def from_extension(cls, ext: str) -> "BookFormat | None":
        """Map an extension (with or without dot, any case) to a format."""
        normalized = ext.lower().lstrip(".")
        for fmt in cls:
            if fmt.extension == normalized:
                return fmt
        return None

    @classmethod
    def from_mime_type(cls, mime_type: str) -> "BookFormat | None":
        for fmt, known in _FORMAT_MIME_TYPES.items():
            if known == mime_type:
                return fmt
        return None

    def __str__(self) -> str:
        return self.value


_FORMAT_MIME_TYPES: dict[BookFormat, str] = {
    BookFormat.EPUB: "application/epub+zip",
    BookFormat.PDF: "application/pdf",
    BookFormat.TXT: "text/plain",
}

EBOOK_EXTENSIONS: frozenset[str] = frozenset(f".{fmt.extension}" for fmt in BookFormat)


@dataclass(frozen=True)
class ManagedFile:
    """A book copied into the platform's managed storage directory."""

    path: Path


@dataclass(frozen=True)
class InlineContent:
    """A book whose full content is embedded in the record as a data URL."""

    data: str


BookStorage = ManagedFile | InlineContent


@dataclass
class BookMetadata:
    """A cataloged book.

    All fields except the reading progress and the display strings are fixed
    at ingestion. The storage field is a tagged variant: filesystem-capable
    platforms reference a managed copy, storage-less ones embed the content.
    """

    id: str
    title: str
    file_name: str
    format: BookFormat
    storage: BookStorage
    size: int
    added_date: str
    author: str = UNKNOWN_AUTHOR
    cover_image: str | None = None
    last_read_position: int = 0
    total_pages: int = 0

    @property
    def file_path(self) -> Path | None:
        """Path of the managed copy, or None for inline storage."""
        if isinstance(self.storage, ManagedFile):
            return self.storage.path
        return None

    @property
    def is_inline(self) -> bool:
        return isinstance(self.storage, InlineContent)


@dataclass(frozen=True)
class FileEntry:
    """One row of a directory listing in the file browser."""

    name: str
    path: Path
    is_directory: bool


@dataclass(frozen=True)
class FilePayload:
    """A file handed over by a file-selection dialog.

    ``type`` is the declared MIME type (may be empty) and ``data`` is the
    content encoded as a ``data:`` URL.
    """

    name: str
    type: str
    size: int
    data: str

    @classmethod
    def from_bytes(cls, name: str, content: bytes, mime_type: str | None = None) -> "FilePayload":
        """Build a payload from raw bytes, guessing the MIME type from the name."""
        declared = mime_type if mime_type is not None else guess_mime_type(name)
        encoded = base64.b64encode(content).decode("ascii")
        return cls(
            name=name,
            type=declared,
            size=len(content),
            data=f"data:{declared or 'application/octet-stream'};base64,{encoded}",
        )

    @classmethod
    def from_path(cls, path: Path) -> "FilePayload":
        """Read a local file into a payload.

        Raises:
            OSError: If the file cannot be read.
        """
        return cls.from_bytes(path.name, path.read_bytes())

    def decode(self) -> bytes:
        """Return the raw bytes carried by the data URL."""
        _, _, encoded = self.data.partition(";base64,")
        return base64.b64decode(encoded)


def guess_mime_type(name: str) -> str:
    """Guess a MIME type for a file name, preferring the known ebook types."""
    fmt = BookFormat.from_extension(Path(name).suffix)
    if fmt is not None:
        return fmt.mime_type
    guessed, _ = mimetypes.guess_type(name)
    return guessed or ""
