# ABOUTME: Public API for the catalog data model.
# ABOUTME: Exports the book record types and JSON conversion helpers.

from readshelf.catalog.mapping import dict_to_record, record_to_dict
from readshelf.catalog.types import (
    BookFormat,
    BookMetadata,
    BookStorage,
    FileEntry,
    FilePayload,
    InlineContent,
    ManagedFile,
)

__all__ = [
    "BookFormat",
    "BookMetadata",
    "BookStorage",
    "FileEntry",
    "FilePayload",
    "InlineContent",
    "ManagedFile",
    "dict_to_record",
    "record_to_dict",
]
