# ABOUTME: Exception hierarchy shared by the ReadShelf storage and ingestion layers.
# ABOUTME: Every failure the Library reports derives from LibraryError.


class LibraryError(Exception):
    """Base class for all errors raised by library operations."""


class ConfigurationError(LibraryError):
    """A required platform directory or capability cannot be resolved."""


class CatalogIOError(LibraryError):
    """Reading, writing, copying, or deleting a file failed."""


class CatalogFormatError(LibraryError):
    """The persisted catalog document could not be decoded."""


class UnsupportedFormatError(LibraryError):
    """The file extension or declared content type is not a supported ebook format."""


class ValidationError(LibraryError):
    """A source was rejected before anything was stored."""


class PayloadTooLargeError(ValidationError):
    """An in-memory payload exceeds the inline storage ceiling."""


class DuplicateBookError(ValidationError):
    """A file with the same name and size is already in the catalog."""


class BookNotFoundError(LibraryError):
    """No book with the requested id exists in the catalog."""
