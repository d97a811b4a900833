# ABOUTME: Converts between BookMetadata dataclasses and JSON-ready dictionaries.
# ABOUTME: Encodes the storage variant as either a file_path or a file_data key.

from pathlib import Path
from typing import Any

from readshelf.catalog.types import (
    BookFormat,
    BookMetadata,
    BookStorage,
    InlineContent,
    ManagedFile,
)
from readshelf.errors import CatalogFormatError

# Fields added after the first catalog version; older records fall back to these.
_OPTIONAL_DEFAULTS: dict[str, Any] = {
    "cover_image": None,
    "last_read_position": 0,
    "total_pages": 0,
}


def record_to_dict(record: BookMetadata) -> dict[str, Any]:
    """Convert a BookMetadata instance to a dict suitable for json.dumps.

    Managed copies are written as ``file_path``; inline content as
    ``file_data``. Exactly one of the two keys is present.
    """
    row: dict[str, Any] = {
        "id": record.id,
        "title": record.title,
        "author": record.author,
        "file_name": record.file_name,
        "format": record.format.value,
        "size": record.size,
    }
    if isinstance(record.storage, ManagedFile):
        row["file_path"] = str(record.storage.path)
    else:
        row["file_data"] = record.storage.data
    row.update(
        {
            "cover_image": record.cover_image,
            "last_read_position": record.last_read_position,
            "total_pages": record.total_pages,
            "added_date": record.added_date,
        }
    )
    return row


def _storage_from_dict(row: dict[str, Any]) -> BookStorage:
    has_path = row.get("file_path") is not None
    has_data = row.get("file_data") is not None
    if has_path == has_data:
        raise CatalogFormatError(
            f"Record {row.get('id')!r} must have exactly one of file_path or file_data"
        )
    if has_path:
        return ManagedFile(Path(row["file_path"]))
    return InlineContent(row["file_data"])


def dict_to_record(row: Any) -> BookMetadata:
    """Convert a decoded JSON object back to a BookMetadata instance.

    Raises:
        CatalogFormatError: If a required field is missing or has the wrong shape.
    """
    if not isinstance(row, dict):
        raise CatalogFormatError(f"Expected a JSON object, got {type(row).__name__}")

    values = {**_OPTIONAL_DEFAULTS, **row}
    try:
        fmt = BookFormat(values["format"])
        return BookMetadata(
            id=str(values["id"]),
            title=str(values["title"]),
            author=str(values["author"]),
            file_name=str(values["file_name"]),
            format=fmt,
            storage=_storage_from_dict(values),
            size=int(values["size"]),
            cover_image=values["cover_image"],
            last_read_position=int(values["last_read_position"]),
            total_pages=int(values["total_pages"]),
            added_date=str(values["added_date"]),
        )
    except KeyError as exc:
        raise CatalogFormatError(f"Record is missing field {exc.args[0]!r}") from exc
    except (TypeError, ValueError) as exc:
        raise CatalogFormatError(f"Invalid record {row.get('id')!r}: {exc}") from exc
