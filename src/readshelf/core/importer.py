# ABOUTME: Ingestion pipeline that turns a file path or an in-memory payload into a BookMetadata.
# ABOUTME: Validates format, size, and duplicates; copies files into managed storage.

import logging
import shutil
import uuid
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path

from readshelf.catalog.types import (
    BookFormat,
    BookMetadata,
    FilePayload,
    InlineContent,
    ManagedFile,
)
from readshelf.errors import (
    CatalogIOError,
    DuplicateBookError,
    PayloadTooLargeError,
    UnsupportedFormatError,
)

logger = logging.getLogger(__name__)

MAX_PAYLOAD_SIZE = 50 * 1024 * 1024  # 50 MiB
_MIB = 1024 * 1024


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def detect_format(path: Path) -> BookFormat:
    """Detect a book's format from its file extension.

    Raises:
        UnsupportedFormatError: If the extension is missing or not supported.
    """
    ext = path.suffix.lstrip(".")
    if not ext:
        raise UnsupportedFormatError("No file extension")
    fmt = BookFormat.from_extension(ext)
    if fmt is None:
        raise UnsupportedFormatError(f"Unsupported format: {ext.lower()}")
    return fmt


def detect_book_format(mime_type: str, filename: str) -> BookFormat | None:
    """Detect a format from a declared MIME type, falling back to the extension."""
    fmt = BookFormat.from_mime_type(mime_type)
    if fmt is not None:
        return fmt
    if "." not in filename:
        return None
    return BookFormat.from_extension(filename.rsplit(".", 1)[1])


def _strip_extension(filename: str, fmt: BookFormat) -> str:
    """Remove a trailing ``.<ext>`` for the given format, ignoring case."""
    suffix = f".{fmt.extension}"
    if filename.lower().endswith(suffix) and len(filename) > len(suffix):
        return filename[: -len(suffix)]
    return filename


def ingest_path(source: Path, storage_dir: Path) -> BookMetadata:
    """Copy a book file into managed storage and build its catalog record.

    The copy is named ``<book id>.<original extension>`` and the title is
    that name without its extension. Nothing is recorded if the copy fails; a
    partially written copy may remain on disk.

    Args:
        source: The file to ingest.
        storage_dir: The platform's managed storage directory.

    Returns:
        A new BookMetadata referencing the managed copy.

    Raises:
        UnsupportedFormatError: If the source has no supported extension.
        CatalogIOError: If the storage directory or the copy cannot be written.
    """
    try:
        storage_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CatalogIOError(f"Failed to create storage: {exc}") from exc

    fmt = detect_format(source)

    book_id = str(uuid.uuid4())
    unique_name = f"{book_id}{source.suffix}"
    dest = storage_dir / unique_name

    try:
        shutil.copyfile(source, dest)
        size = dest.stat().st_size
    except OSError as exc:
        raise CatalogIOError(f"Failed to copy file: {exc}") from exc

    logger.info("Copied %s to %s (%d bytes)", source, dest, size)
    return BookMetadata(
        id=book_id,
        title=dest.stem,
        file_name=unique_name,
        format=fmt,
        storage=ManagedFile(dest),
        size=size,
        added_date=_now(),
    )


def ingest_payload(payload: FilePayload, existing: Sequence[BookMetadata]) -> BookMetadata:
    """Validate an in-memory payload and build an inline-storage record.

    Checks run in order: size ceiling, format, then duplicate (same file name
    and size as an existing record).

    Raises:
        PayloadTooLargeError: If the payload exceeds MAX_PAYLOAD_SIZE.
        UnsupportedFormatError: If neither type nor name yields a format.
        DuplicateBookError: If an identical name and size is already cataloged.
    """
    logger.info("Adding book: %s (%d bytes)", payload.name, payload.size)

    if payload.size > MAX_PAYLOAD_SIZE:
        raise PayloadTooLargeError(
            f"File too large: {payload.size // _MIB} MB (max {MAX_PAYLOAD_SIZE // _MIB} MB)"
        )

    fmt = detect_book_format(payload.type, payload.name)
    if fmt is None:
        raise UnsupportedFormatError("Unsupported file format")

    if any(b.file_name == payload.name and b.size == payload.size for b in existing):
        raise DuplicateBookError("This book already exists in your library")

    return BookMetadata(
        id=str(uuid.uuid4()),
        title=_strip_extension(payload.name, fmt),
        file_name=payload.name,
        format=fmt,
        storage=InlineContent(payload.data),
        size=payload.size,
        added_date=_now(),
    )
