# ABOUTME: Public API for the ReadShelf storage layer.
# ABOUTME: Exports the platform path resolvers and the JSON catalog store.

from readshelf.storage.paths import (
    AndroidPaths,
    DesktopPaths,
    PlatformPaths,
    WebPaths,
    resolve_platform,
)
from readshelf.storage.store import CatalogStore

__all__ = [
    "AndroidPaths",
    "CatalogStore",
    "DesktopPaths",
    "PlatformPaths",
    "WebPaths",
    "resolve_platform",
]
