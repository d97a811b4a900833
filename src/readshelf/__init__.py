# ABOUTME: ReadShelf - a personal ebook catalog with platform-aware storage.
# ABOUTME: Exposes the Library entry point and the platform resolver.

from readshelf.core.library import Library, LibrarySnapshot, open_library
from readshelf.storage.paths import resolve_platform

__all__ = ["Library", "LibrarySnapshot", "open_library", "resolve_platform"]
