# ABOUTME: Core library operations: ingestion, directory browsing, and the Library itself.
# ABOUTME: Re-exports the names the presentation layer needs.

from readshelf.core.browser import DirectoryBrowser, list_directory
from readshelf.core.importer import MAX_PAYLOAD_SIZE, ingest_path, ingest_payload
from readshelf.core.library import Library, LibrarySnapshot, open_library
from readshelf.core.picker import FilePicker, PathListPicker

__all__ = [
    "MAX_PAYLOAD_SIZE",
    "DirectoryBrowser",
    "FilePicker",
    "Library",
    "LibrarySnapshot",
    "PathListPicker",
    "ingest_path",
    "ingest_payload",
    "list_directory",
    "open_library",
]
